# Standard library imports
import logging

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.exceptions import InvalidUserError, UserNotFoundError
from .locks import AsyncReadWriteLock

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository, lives for the process lifetime"""

    def __init__(self) -> None:
        self._users: list[User] = []
        self._ids: set[str] = set()
        self._lock = AsyncReadWriteLock()

    async def find_all(self) -> list[User]:
        """
        Get all users

        Returns:
            Copy of the stored users in insertion order
        """
        async with self._lock.read():
            return list(self._users)

    async def find_by_id(self, user_id: str) -> User:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            First stored User with a matching ID

        Raises:
            UserNotFoundError: If no user has this ID
        """
        async with self._lock.read():
            for user in self._users:
                if user.id == user_id:
                    return user
        raise UserNotFoundError(user_id)

    async def save(self, user: User) -> User:
        """
        Append a new user

        Args:
            user: User domain model with its ID already assigned

        Returns:
            The stored User

        Raises:
            InvalidUserError: If ID or name is empty, or the ID is already stored
        """
        if not user.id or not user.name:
            raise InvalidUserError("User ID and name are required")

        async with self._lock.write():
            if user.id in self._ids:
                raise InvalidUserError(f"User with ID {user.id} already exists")
            self._users.append(user)
            self._ids.add(user.id)
            logger.debug(f"Stored user {user.id} ({len(self._users)} total)")

        return user
