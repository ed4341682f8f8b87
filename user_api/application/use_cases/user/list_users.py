# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Use case for listing all users"""

    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        """
        List all users

        Returns:
            List of UserResponse objects in creation order
        """
        users = await self.user_repository.find_all()
        logger.debug(f"Listed {len(users)} users")

        return [UserResponse(id=user.id, name=user.name) for user in users]
