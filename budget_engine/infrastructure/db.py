"""Database infrastructure for the budget engine.

This module exposes concrete helpers to create and reuse SQLAlchemy engines
connected to the budget storage database. It belongs to the infrastructure
layer because it deals with external systems (PostgreSQL or SQLite).
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from budget_engine.application.ports.database import DatabaseEnginePort

DB_URL_ENV = "BUDGET_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engines: dict[str, Engine] = {}


def get_engine(db_url: str | None = None) -> Engine:
    """Get a cached SQLAlchemy engine for the storage database.

    Args:
        db_url: Optional explicit URL; defaults to ``BUDGET_DB_URL``.

    Returns:
        Engine: Lazily initialized engine, one per distinct URL.
    """
    resolved_url = db_url or _get_env_var(DB_URL_ENV)
    engine = _engines.get(resolved_url)
    if engine is None:
        engine = _create_engine(resolved_url)
        _engines[resolved_url] = engine
    return engine


def dispose_engines() -> None:
    """Dispose and forget every cached engine."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine for the storage database.

        Returns:
            Engine: SQLAlchemy engine connected to the storage backend.
        """
        return get_engine(self._db_url)


__all__ = [
    "DB_URL_ENV",
    "get_engine",
    "dispose_engines",
    "SqlAlchemyDatabaseEngineAdapter",
]
