import logging
from typing import TYPE_CHECKING
from ...core.config import MEMORY_BACKEND, MONGO_BACKEND, Settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.memory_user_repository import InMemoryUserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the UserRepository implementation selected by settings.

        Raises:
            ValueError: If the configured backend is unknown
        """
        backend = settings.user_repository_backend

        if backend == MEMORY_BACKEND:
            repository: UserRepository = InMemoryUserRepository()
        elif backend == MONGO_BACKEND:
            repository = MongoUserRepository(user_collection=container.get("user_collection"))
        else:
            raise ValueError(
                f"Unknown user repository backend '{backend}'. "
                f"Expected '{MEMORY_BACKEND}' or '{MONGO_BACKEND}'."
            )

        container.register_singleton(UserRepository, repository)
        logger.info(f"User repository backend: {backend}")
