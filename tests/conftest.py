"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from src.config import get_settings
from src.database import Base, Database, get_db
from src.main import app
from src.models import Category, Todo
from src.models.enums import Priority

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = get_settings().database_url.replace("/todo_app", "/todo_app_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

test_database = Database(SQLALCHEMY_DATABASE_URL)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    test_database.create_all()
    yield
    test_database.close()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = test_database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def category(db):
    """Create a single category."""
    category = Category(name="Work", color="#3B82F6")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def make_todo(db):
    """Factory for todos inserted directly through the session."""

    def _make_todo(title="Todo", **kwargs):
        kwargs.setdefault("priority", Priority.MEDIUM)
        todo = Todo(title=title, **kwargs)
        db.add(todo)
        db.commit()
        db.refresh(todo)
        return todo

    return _make_todo
