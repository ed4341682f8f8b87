from abc import ABC, abstractmethod
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.

    Implementations raise the errors from ``domain.exceptions`` rather than
    returning sentinel values.
    """

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Return all users in insertion order"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> User:
        """Find user by ID, raising UserNotFoundError on a miss"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Append a new user, raising InvalidUserError if it is incomplete or its ID is taken"""
        pass
