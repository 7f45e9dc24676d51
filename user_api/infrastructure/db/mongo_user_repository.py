# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.exceptions import DuplicateUserError
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self._indexes_ready = False

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def ensure_indexes(self) -> None:
        """Create the unique username index (idempotent)"""
        try:
            await self.user_collection.create_index(UserFields.USERNAME, unique=True)
        except Exception as e:
            raise RuntimeError(f"Error creating user indexes: {str(e)}")
        self._indexes_ready = True

    async def save(self, user: User) -> User:
        """
        Insert a new user

        The unique username index is created before the first insert, so
        concurrent inserts of the same username cannot both succeed.

        Args:
            user: User domain model to insert; its id must be unset

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateUserError: If the username already exists
        """
        if not user:
            raise ValueError("User cannot be None")
        if user.id:
            raise ValueError(f"User {user.id} is already stored")

        if not self._indexes_ready:
            await self.ensure_indexes()

        try:
            result = await self.user_collection.insert_one(self._user_to_dict(user))
            saved_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError:
            raise DuplicateUserError(f"username '{user.username}' is already taken")
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        if saved_document is None:
            raise RuntimeError("User was saved but could not be retrieved")
        return self._document_to_user(saved_document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            role=document.get(UserFields.ROLE, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        # _id is assigned by MongoDB on insert
        return {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.ROLE: user.role,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
