from warden.domain.auth.services.password_service import PasswordService
from warden.domain.auth.services.token_service import TokenService

__all__ = ["PasswordService", "TokenService"]
