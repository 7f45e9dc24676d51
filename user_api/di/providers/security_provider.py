from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...core.security import TokenManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Builds the TokenManager from settings; this is the only reader of the signing secret"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(
            TokenManager,
            TokenManager(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.access_token_expire_minutes,
            )
        )
