"""Database infrastructure for the farm dashboard.

This module exposes helpers to create and reuse the SQLAlchemy engine
holding the local key-value store. It belongs to the infrastructure layer
because it deals with an external system (SQLite by default).
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import DashboardSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with connection health checks enabled.
    """
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine(db_url: str | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the dashboard database.

    Args:
        db_url: Optional URL overriding the configured one on first use.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        resolved_url = db_url or DashboardSettings.from_env().db_url
        _engine = _create_engine(resolved_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details behind the port so application
    code can depend only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine for the dashboard database.

        Returns:
            Engine: SQLAlchemy engine connected to the local store.
        """
        return get_engine(self._db_url)


__all__ = [
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
