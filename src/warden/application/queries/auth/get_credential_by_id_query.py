from uuid import UUID

from warden.domain.auth import AuthNotFoundError, Credential, CredentialRepository


class GetCredentialByIdQuery:
    """Load a credential by id or fail with AuthNotFoundError."""

    def __init__(self, credential_repository: CredentialRepository):
        self._credential_repo = credential_repository

    async def execute(self, credential_id: UUID) -> Credential:
        credential = await self._credential_repo.find_by_id(credential_id)
        if credential is None:
            raise AuthNotFoundError
        return credential
