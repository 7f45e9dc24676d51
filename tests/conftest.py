"""
Shared pytest fixtures for user service tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from user_api.core.security import TokenManager
from user_api.domain.models.user import User
from user_api.domain.services.user_service import UserService


TEST_SECRET = "test-signing-secret-for-unit-tests-only-0123456789abcdef0123456789abcdef"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_users_db",
        "JWT_SECRET_KEY": TEST_SECRET,
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def token_manager():
    return TokenManager(secret_key=TEST_SECRET, algorithm="HS256", expire_minutes=60)


@pytest.fixture
def sample_user():
    return User(
        id="64b7f0c2a1b2c3d4e5f60718",
        username="alice",
        email="alice@example.com",
        first_name="Alice",
        last_name="Liddell",
        role="admin",
        hashed_password="$2b$12$hashed",
    )


@pytest.fixture
def mock_user_service():
    """UserService double; every method is an AsyncMock recording its calls."""
    return AsyncMock(spec=UserService)


@pytest.fixture
def mock_container(mock_user_service, token_manager):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        UserService: mock_user_service,
        TokenManager: token_manager,
    }.get(cls, None)
    return container
