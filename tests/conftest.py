"""
Shared pytest fixtures for user_api tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from user_api.core.config import MEMORY_BACKEND, MONGO_BACKEND
from user_api.di.container import DIContainer
from user_api.infrastructure.db.memory_user_repository import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "APP_NAME": "Test User API",
        "API_PORT": "5050",
        "LOG_LEVEL": "DEBUG",
        "USER_REPOSITORY_BACKEND": MEMORY_BACKEND,
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_api",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Settings stand-in selecting the in-memory backend."""
    mock = MagicMock()
    mock.app_name = "Test User API"
    mock.user_repository_backend = MEMORY_BACKEND
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_user_api"
    return mock


@pytest.fixture
def mock_mongo_settings(mock_settings):
    mock_settings.user_repository_backend = MONGO_BACKEND
    return mock_settings


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


@pytest.fixture
def memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
def container(mock_settings):
    """Fresh container wired to a new in-memory repository."""
    return DIContainer(settings=mock_settings)
