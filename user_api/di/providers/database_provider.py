from typing import TYPE_CHECKING
from ...core.config import MONGO_BACKEND, Settings
from ...infrastructure.db.mongo_connection import get_database, get_user_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register database collections in the container.
        The in-memory backend needs no connection, so nothing is registered for it.
        """
        if settings.user_repository_backend != MONGO_BACKEND:
            return

        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
