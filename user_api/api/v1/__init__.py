from .user_controller import router as user_router
from .errors import register_error_handlers, respond_with_error


__all__ = ["user_router", "register_error_handlers", "respond_with_error"]
