from warden.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from warden.infrastructure.security.jwt_token_service import JWTTokenService

__all__ = ["BcryptPasswordService", "JWTTokenService"]
