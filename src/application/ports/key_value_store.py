"""Port for the durable key-value store holding the log history."""

from typing import Protocol


class KeyValueStorePort(Protocol):
    """Port exposing a string blob store addressed by key."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    def remove(self, key: str) -> None:
        """Delete ``key`` if present."""


__all__ = ["KeyValueStorePort"]
