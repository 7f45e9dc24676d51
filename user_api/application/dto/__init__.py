from .auth_dto import LoginRequest, LoginResponse, RefreshTokenRequest
from .error_dto import ErrorResponse
from .user_dto import (
    CreateUserRequest,
    CreateUserResponse,
    GetUserResponse,
    UserResponse,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "RefreshTokenRequest",
    "ErrorResponse",
    "CreateUserRequest",
    "CreateUserResponse",
    "GetUserResponse",
    "UserResponse",
]
