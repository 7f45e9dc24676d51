from .user import CreateUser, User, UserRole

__all__ = ["CreateUser", "User", "UserRole"]
