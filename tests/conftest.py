import os

import mongomock
import pytest
from fastapi.testclient import TestClient

# Must be set before src.database.connection is imported
os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB_NAME", "blog_test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from src.database.connection import get_db  # noqa: E402
from src.main import app  # noqa: E402


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    return mongomock.MongoClient()["blog_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_post(db):
    def _make(title="Hello", body="World", tags=None):
        doc = {"title": title, "body": body, "tags": tags if tags is not None else ["intro"]}
        db.posts.insert_one(doc)
        return doc
    return _make
