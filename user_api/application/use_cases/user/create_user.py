# Standard library imports
import logging
import uuid

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import InvalidUserError
from ...dto.user_dto import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


def generate_user_id() -> str:
    """Return a new random UUID4 string"""
    return str(uuid.uuid4())


class CreateUserUseCase:
    """Use case for creating a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user

        Args:
            request: User creation request

        Returns:
            UserResponse with the created user, including its assigned ID

        Raises:
            InvalidUserError: If the name is empty or the repository rejects the user
        """
        if not request.name:
            raise InvalidUserError("Name is required")

        new_user = User(
            id=generate_user_id(),
            name=request.name,
        )

        saved_user = await self.user_repository.save(new_user)

        logger.info(f"Created user {saved_user.id}")

        return UserResponse(
            id=saved_user.id,
            name=saved_user.name,
        )
