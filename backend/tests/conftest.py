import asyncio
import os
import tempfile

import pytest
import pytest_asyncio

# Point the application at a throwaway database before it is imported
_TEST_DB_PATH = os.path.join(tempfile.gettempdir(), f"quicksearch-test-{os.getpid()}.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_PATH}"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from fastapi.testclient import TestClient  # noqa: E402

from quicksearch.main import app  # noqa: E402
from quicksearch.database import AsyncSessionLocal, create_tables, drop_tables  # noqa: E402
from quicksearch.workspace import Workspace  # noqa: E402


async def _reset_database():
    await drop_tables()
    await create_tables()


@pytest.fixture
def client():
    """Test client backed by an empty workspace database."""
    asyncio.run(_reset_database())
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db_session():
    """Session on an empty workspace database."""
    await _reset_database()
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def workspace():
    """Empty in-memory workspace."""
    return Workspace()


@pytest.fixture
def create_item(client):
    """Create a job or folder through the API and return its JSON."""
    def _create(name, kind="job", display_name=None, parent=None):
        payload = {"name": name, "kind": kind}
        if display_name is not None:
            payload["display_name"] = display_name
        if parent is not None:
            payload["parent"] = parent
        response = client.post("/api/v1/items", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


def pytest_sessionfinish(session, exitstatus):
    if os.path.exists(_TEST_DB_PATH):
        os.remove(_TEST_DB_PATH)
