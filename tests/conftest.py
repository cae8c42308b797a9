"""Pytest configuration.

Settings are read from the environment when ``entitygate.core.config`` is
first imported, so the test environment is fixed here before any test
module imports the package.

Fixtures:
    database: Fresh SQLite database (file in tmp_path) with all tables
    session: Committing session on that database
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from entitygate.infrastructure.persistence.database import Database  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: API tests through the ASGI app")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest_asyncio.fixture
async def database(tmp_path):
    """Provide an isolated SQLite database with the schema created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    """Provide a session that commits when the test finishes."""
    async with database.get_session() as session:
        yield session
