# Standard library imports
from datetime import datetime, timezone
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import InvalidUserError, UserNotFoundError, UserRepositoryError
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_all(self) -> list[User]:
        """
        Get all users

        Returns:
            List of User domain models in creation order
        """
        try:
            users: list[User] = []
            cursor = self.user_collection.find({}).sort(
                [(UserFields.CREATED_AT, ASCENDING), (UserFields.MONGO_ID, ASCENDING)]
            )
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise UserRepositoryError(f"Error listing users: {str(e)}") from e

    async def find_by_id(self, user_id: str) -> User:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model

        Raises:
            UserNotFoundError: If no document has this ID
        """
        if not user_id:
            raise UserNotFoundError(user_id)

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: user_id})
        except PyMongoError as e:
            raise UserRepositoryError(f"Error finding user by ID: {str(e)}") from e

        if document is None:
            raise UserNotFoundError(user_id)
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Insert a new user document

        Args:
            user: User domain model to save

        Returns:
            The saved User domain model
        """
        if not user.id or not user.name:
            raise InvalidUserError("User ID and name are required")

        try:
            await self.user_collection.insert_one(self._user_to_dict(user))
        except DuplicateKeyError as e:
            raise InvalidUserError(f"User with ID {user.id} already exists") from e
        except PyMongoError as e:
            raise UserRepositoryError(f"Error saving user: {str(e)}") from e

        return user

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise UserRepositoryError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        return {
            UserFields.MONGO_ID: user.id,
            UserFields.NAME: user.name,
            UserFields.CREATED_AT: datetime.now(timezone.utc),
        }
