from warden.domain.auth import TokenClaims, TokenService
from warden.domain.user import User


class IssueTokenCommand:
    """Build the claims for a validated user and sign them."""

    def __init__(self, token_service: TokenService):
        self._token_service = token_service

    def execute(self, user: User) -> str:
        claims = TokenClaims(auth_id=user.auth_id, user_id=user.id, role=user.role)
        return self._token_service.issue(claims)
