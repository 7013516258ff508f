from warden.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LoginUser,
    SignupRequest,
)
from warden.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from warden.presentation.api.schemas.users import (
    PaginationMeta,
    UpdateUserRequest,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "LoginUser",
    "MessageResponse",
    "PaginationMeta",
    "SignupRequest",
    "UpdateUserRequest",
    "UserListResponse",
    "UserResponse",
]
