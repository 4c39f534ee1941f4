"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base: Any = declarative_base()

# Largest value an INTEGER column holds on PostgreSQL
MAX_INTEGER = 2**31 - 1


class Database:
    """Owns the engine and session factory for one application instance.

    Opened when the application starts and disposed when it shuts down.
    """

    def __init__(self, url: str, **engine_kwargs: Any):
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)

        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        """Open a new session bound to this database."""
        return self.session_factory()

    def create_all(self) -> None:
        """Create all tables known to the models."""
        # Import all models here so they are registered with Base.metadata
        from src import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        """Dispose of the connection pool."""
        self.engine.dispose()
        logger.info("Database connections closed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
