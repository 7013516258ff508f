from warden.domain.auth.value_objects.email import Email
from warden.domain.auth.value_objects.token_claims import TokenClaims

__all__ = ["Email", "TokenClaims"]
