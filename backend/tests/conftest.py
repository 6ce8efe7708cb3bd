"""
Afterclass API: Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The MongoDB database is replaced by MagicMock/AsyncMock stand-ins that
       mimic pymongo's async collection API, injected through FastAPI's
       dependency overrides. No MongoDB server is needed.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── lessons_collection / orders_collection: mocked AsyncCollection
    ├── mock_db: mocked AsyncDatabase returning the collections above
    ├── sample_lessons: lesson documents with real ObjectIds
    ├── images_dir: temporary static image directory
    ├── test_app: FastAPI app wired to mock_db and images_dir
    └── test_client: HTTPX AsyncClient for endpoint testing
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["MONGODB_URI"] = "mongodb://test-host:27017"
os.environ["MONGODB_DB"] = "afterclass_test"
os.environ["IMAGES_DIR"] = tempfile.mkdtemp(prefix="afterclass_images_")
os.environ["LOG_LEVEL"] = "WARNING"


def make_cursor(documents):
    """A stand-in for AsyncCursor: find() returns it, to_list() is awaited."""
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


def make_collection():
    collection = MagicMock()
    collection.find = MagicMock(return_value=make_cursor([]))
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.insert_many = AsyncMock()
    collection.update_one = AsyncMock()
    collection.drop = AsyncMock()
    return collection


@pytest.fixture
def cursor_of():
    """
    Usage:
        lessons_collection.find.return_value = cursor_of([lesson])
    """
    return make_cursor


@pytest.fixture
def lessons_collection():
    return make_collection()


@pytest.fixture
def orders_collection():
    return make_collection()


@pytest.fixture
def mock_db(lessons_collection, orders_collection):
    """
    Mock AsyncDatabase: db["lessons"] and db["orders"] return the collection
    fixtures, so tests configure and inspect those directly.
    """
    collections = {"lessons": lessons_collection, "orders": orders_collection}
    db = MagicMock()
    db.__getitem__.side_effect = collections.__getitem__
    return db


@pytest.fixture
def sample_lessons():
    return [
        {"_id": ObjectId(), "topic": "Math", "location": "Hendon", "price": 100, "space": 5},
        {"_id": ObjectId(), "topic": "English", "location": "Colindale", "price": 80, "space": 3},
        {"_id": ObjectId(), "topic": "Music", "location": "Brent Cross", "price": "90", "space": "2"},
    ]


@pytest.fixture
def images_dir(tmp_path):
    path = tmp_path / "images"
    path.mkdir()
    return path


@pytest.fixture
def test_app(mock_db, images_dir):
    """
    App built from fresh Settings pointing at images_dir, with get_database
    overridden to return mock_db. ASGITransport does not run the lifespan,
    so no connection is attempted.
    """
    from afterclass.config import Settings
    from afterclass.database import get_database
    from afterclass.main import create_app

    app = create_app(Settings(images_dir=str(images_dir)))
    app.dependency_overrides[get_database] = lambda: mock_db
    return app


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
