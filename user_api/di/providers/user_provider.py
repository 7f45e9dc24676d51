from typing import TYPE_CHECKING
from ...core.security import TokenManager
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.user_service import UserService
from ...application.services.user_service import DefaultUserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers the UserService implementation"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            UserService,
            DefaultUserService(
                user_repository=container.get(UserRepository),
                token_manager=container.get(TokenManager),
            )
        )
