"""SQLAlchemy-backed key-value store for the log history blob."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.key_value_store import KeyValueStorePort


CREATE_KV_STORE_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""

SELECT_VALUE_SQL = text("SELECT value FROM kv_store WHERE key = :key")

DELETE_VALUE_SQL = text("DELETE FROM kv_store WHERE key = :key")

INSERT_VALUE_SQL = text(
    """
    INSERT INTO kv_store (key, value)
    VALUES (:key, :value)
    """
)


class SqlAlchemyKeyValueStore(KeyValueStorePort):
    """Key-value store kept in a single SQL table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the dashboard engine.
        """
        self._db_port = db_port
        self._prepared = False

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``."""
        self._prepare()
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_VALUE_SQL, {"key": key}).first()
        return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        """Replace the value stored under ``key``."""
        self._prepare()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_VALUE_SQL, {"key": key})
            conn.execute(INSERT_VALUE_SQL, {"key": key, "value": value})

    def remove(self, key: str) -> None:
        """Delete ``key`` if present."""
        self._prepare()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_VALUE_SQL, {"key": key})

    def _prepare(self) -> None:
        """Ensure the key-value table exists."""
        if self._prepared:
            return
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_KV_STORE_SQL)
        self._prepared = True


__all__ = ["SqlAlchemyKeyValueStore"]
