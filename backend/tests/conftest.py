"""
Pytest configuration and fixtures

Every test runs against a fresh in-memory SQLite database. Tables are created
before each test and dropped after it, so nothing leaks between tests.
"""
import os
import sys

# Must be set before app.database is imported
os.environ["DATABASE_URL"] = "sqlite://"

# Add the backend directory to the path so we can import app
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.models import db_models  # noqa: F401
from app.services.access_store import AccessStore, SubscriberWatchHub
from app.services.catalog import InMemoryProgressStorage


@pytest.fixture(autouse=True)
def _schema():
    """Create tables for one test, drop them afterwards."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def watch_hub():
    return SubscriberWatchHub()


@pytest.fixture
def store(db_session, watch_hub):
    return AccessStore(db_session, watch_hub)


@pytest.fixture
def progress_storage():
    return InMemoryProgressStorage()


@pytest.fixture
def client():
    """API client. Used without a context manager so startup does not run."""
    from app.main import app
    return TestClient(app)
