# Standard library imports
import os
from typing import Final, Optional


MEMORY_BACKEND: Final[str] = "memory"
MONGO_BACKEND: Final[str] = "mongo"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.app_name: Final[str] = os.getenv("APP_NAME", "User API")
        self.api_host: Final[str] = os.getenv("API_HOST", "0.0.0.0")
        self.api_port: Final[int] = int(os.getenv("API_PORT", "5000"))
        self.cors_origins: Final[list[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_file: Final[Optional[str]] = os.getenv("LOG_FILE") or None

        # Storage Configuration ("memory" or "mongo")
        self.user_repository_backend: Final[str] = os.getenv(
            "USER_REPOSITORY_BACKEND", MEMORY_BACKEND
        ).strip().lower()

        # Database Configuration (mongo backend only)
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "user_api")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
