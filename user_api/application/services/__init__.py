from .user_service import DefaultUserService

__all__ = ["DefaultUserService"]
