from abc import ABC, abstractmethod
from ..models.user import CreateUser, User


class UserService(ABC):
    """
    Capability interface consumed by the HTTP handlers.

    Implementations own persistence, credential checking and token issuance.
    Every method raises on failure; handlers decide the status code.
    """

    @abstractmethod
    async def create(self, new_user: CreateUser) -> User:
        """Persist a new user and return it with its ID set"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User:
        """Return the user with the given ID"""
        pass

    @abstractmethod
    async def login(self, username: str, password: str, referer: str) -> str:
        """Check credentials and return a signed access token"""
        pass

    @abstractmethod
    async def refresh_token(self, user_id: str, username: str, role: str, referer: str) -> str:
        """Mint a new access token for an already verified identity"""
        pass
