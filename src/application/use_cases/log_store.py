"""Ordered store of weekly log entries backed by a key-value blob.

The whole history is serialized into a single value and rewritten after
every mutation. Insertion order is chronological order.
"""

from src.application.ports.key_value_store import KeyValueStorePort
from src.domain.constants import DEFAULT_STORAGE_KEY
from src.domain.errors import PersistenceCorruptionError
from src.domain.models.farm import WeeklyLogEntry
from src.domain.services.serialization import (
    entries_from_json,
    entries_to_json,
)
from src.infrastructure.logging.logger import get_app_logger


class WeeklyLogStore:
    """Session-owned list of weekly log entries with durable persistence."""

    def __init__(
        self,
        storage: KeyValueStorePort,
        storage_key: str = DEFAULT_STORAGE_KEY,
        logger=None,
    ) -> None:
        """Initialize an empty store.

        Args:
            storage: Port providing the durable key-value blob.
            storage_key: Key holding the serialized history.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._storage_key = storage_key
        self._logger = logger or get_app_logger()
        self._entries: list[WeeklyLogEntry] = []

    @property
    def entries(self) -> tuple[WeeklyLogEntry, ...]:
        """Return the current entries in chronological order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> list[WeeklyLogEntry]:
        """Restore entries from storage.

        A missing or undecodable blob yields an empty history.

        Returns:
            list[WeeklyLogEntry]: Restored entries in stored order.
        """
        blob = self._storage.get(self._storage_key)
        if not blob:
            self._entries = []
            return []
        try:
            entries = entries_from_json(blob)
        except PersistenceCorruptionError as exc:
            self._logger.warning(
                f"Failed to load log history from '{self._storage_key}', "
                f"starting empty: {exc}"
            )
            self._entries = []
            return []
        self._entries = entries
        self._logger.info(f"Loaded {len(entries)} weekly log entries")
        return list(entries)

    def append(self, entry: WeeklyLogEntry) -> None:
        """Add an entry at the end of the history and persist.

        The in-memory history only changes once storage accepted the new
        sequence; a failing write propagates and leaves the store as it was.
        """
        candidate = [*self._entries, entry]
        self._storage.set(self._storage_key, entries_to_json(candidate))
        self._entries = candidate

    def clear(self) -> None:
        """Remove every entry and delete the persisted blob."""
        self._entries = []
        self._storage.remove(self._storage_key)
        self._logger.info(f"Cleared log history '{self._storage_key}'")

    def save(self) -> None:
        """Write the full ordered history to storage."""
        self._storage.set(self._storage_key, entries_to_json(self._entries))


__all__ = ["WeeklyLogStore"]
