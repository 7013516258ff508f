from warden.domain.auth.repositories.credential_repository import (
    CredentialRepository,
)

__all__ = ["CredentialRepository"]
