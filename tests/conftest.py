"""
Shared pytest fixtures for roommate_backend tests.
"""
import logging
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from roommate_backend.core.config import reset_settings
from roommate_backend.infrastructure.db.database import create_session_factory, init_models
from roommate_backend.infrastructure.db.sqlalchemy_user_repository import SqlAlchemyUserRepository


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to point settings at a throwaway SQLite file."""
    env_vars = {
        "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'env.db'}",
        "DATABASE_ECHO": "false",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings. Patches the modules that use it."""
    mock = MagicMock()
    mock.database_url = "sqlite+aiosqlite:///:memory:"
    mock.database_echo = False
    mock.log_level = "INFO"

    with patch("roommate_backend.core.config.get_settings", return_value=mock), patch(
        "roommate_backend.core.logger.get_settings", return_value=mock
    ), patch("roommate_backend.infrastructure.db.database.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after setup_logger() replaces them."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest_asyncio.fixture
async def engine(tmp_path):
    """File-backed SQLite engine with the schema created; one database per test."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'users.db'}", hide_parameters=True
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def user_repo(session_factory):
    return SqlAlchemyUserRepository(session_factory=session_factory)
