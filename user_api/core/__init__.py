from .config import Settings, get_settings, reset_settings, MEMORY_BACKEND, MONGO_BACKEND
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "MEMORY_BACKEND",
    "MONGO_BACKEND",
    "setup_logging",
]
