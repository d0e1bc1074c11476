"""Pytest configuration and fixtures."""
import os

os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from kansas.database import Database
from kansas.main import app


@pytest_asyncio.fixture
async def test_db(tmp_path):
    """A Database on a fresh SQLite file with the schema created."""
    db = Database(str(tmp_path / "kansas_test.db"))
    await db.connect()
    yield db


@pytest_asyncio.fixture
async def app_client(test_db):
    """
    Create a test client backed by a clean test database.

    This fixture:
    - Points the global database at a temporary SQLite file
    - Yields an async HTTP client for testing
    - Restores the original database path afterwards
    """
    from kansas.database import database
    original_path = database.path
    database.path = test_db.path

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    database.path = original_path


@pytest_asyncio.fixture
async def user_id(test_db):
    """Id of a freshly created active user."""
    from kansas.models.user import UserStatus
    from kansas.stores.user_store import UserStore

    return await UserStore(test_db).create_user(
        first_name="Olivia",
        last_name="Graham",
        email="olivia@example.com",
        user_status=UserStatus.ACTIVE,
        password_hash="$2b$12$notarealhash",
        auth_hash=None,
        auth_timestamp=None,
    )
