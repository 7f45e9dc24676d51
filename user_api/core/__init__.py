from .config import Settings, get_settings
from .security import (
    TokenClaims,
    TokenManager,
    TokenValidationError,
    hash_password,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "TokenClaims",
    "TokenManager",
    "TokenValidationError",
    "hash_password",
    "verify_password",
]
