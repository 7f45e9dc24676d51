# Standard library imports
import asyncio
import logging

# Local application imports
from ...core.security import TokenManager, hash_password, verify_password
from ...domain.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    UserNotFoundError,
    UserServiceError,
)
from ...domain.models.user import CreateUser, User
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.user_service import UserService

logger = logging.getLogger(__name__)


class DefaultUserService(UserService):
    """UserService backed by a UserRepository and a TokenManager"""

    def __init__(self, user_repository: UserRepository, token_manager: TokenManager) -> None:
        self.user_repository = user_repository
        self.token_manager = token_manager

    async def create(self, new_user: CreateUser) -> User:
        """
        Register a new user

        Args:
            new_user: Creation payload with the plain text password

        Returns:
            The stored User with its ID set

        Raises:
            DuplicateUserError: If the username is already taken, including
                when a concurrent create wins the race to insert it
            UserServiceError: If the repository fails
        """
        try:
            existing_user = await self.user_repository.find_by_username(new_user.username)
            if existing_user is not None:
                raise DuplicateUserError(f"username '{new_user.username}' is already taken")

            # bcrypt is CPU-bound; keep it off the event loop
            hashed_password = await asyncio.to_thread(hash_password, new_user.password)

            user = User(
                id=None,  # Will be set by repository
                username=new_user.username,
                email=new_user.email,
                first_name=new_user.first_name,
                last_name=new_user.last_name,
                role=new_user.role,
                hashed_password=hashed_password,
            )
            saved_user = await self.user_repository.save(user)
        except UserServiceError:
            raise
        except (RuntimeError, ValueError) as e:
            raise UserServiceError(str(e)) from e

        logger.info(f"Created user {saved_user.id} ({saved_user.username})")
        return saved_user

    async def get_by_id(self, user_id: str) -> User:
        try:
            user = await self.user_repository.find_by_id(user_id)
        except RuntimeError as e:
            raise UserServiceError(str(e)) from e

        if user is None:
            raise UserNotFoundError(f"user {user_id} not found")
        return user

    async def login(self, username: str, password: str, referer: str) -> str:
        """
        Authenticate a user and issue an access token

        Unknown usernames and wrong passwords produce the same error so the
        caller cannot tell which one failed.
        """
        try:
            user = await self.user_repository.find_by_username(username)
        except RuntimeError as e:
            raise UserServiceError(str(e)) from e

        password_ok = user is not None and await asyncio.to_thread(
            verify_password, password, user.hashed_password
        )
        if not password_ok:
            logger.warning(f"Failed login for '{username}' (referer: {referer or '-'})")
            raise InvalidCredentialsError("invalid username or password")

        token = self.token_manager.issue(sub=user.id or "", username=user.username, role=user.role)
        logger.info(f"User {user.id} logged in (referer: {referer or '-'})")
        return token

    async def refresh_token(self, user_id: str, username: str, role: str, referer: str) -> str:
        token = self.token_manager.issue(sub=user_id, username=username, role=role)
        logger.info(f"Refreshed token for user {user_id} (referer: {referer or '-'})")
        return token
