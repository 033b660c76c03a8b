"""Database port for the budget engine.

Infrastructure implementations provide a concrete adapter that hands out a
SQLAlchemy engine; repositories depend on this protocol only.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the storage database engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the budget storage database.

        Returns:
            Engine: SQLAlchemy engine connected to the storage backend.
        """


__all__ = ["DatabaseEnginePort"]
