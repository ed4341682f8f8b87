# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        return UserResponse(id=user.id, name=user.name)
