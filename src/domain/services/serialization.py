"""Encoding of the weekly log history blob."""

from datetime import datetime, timezone
import json

from src.domain.errors import PersistenceCorruptionError
from src.domain.models.farm import WeeklyLogEntry
from src.domain.services.records import record_from_payload, record_to_payload


def entries_to_json(entries) -> str:
    """Serialize an ordered sequence of entries to a JSON array.

    Args:
        entries: Weekly log entries in chronological order.

    Returns:
        str: JSON document preserving the entry order.
    """
    payload = [
        {
            "id": entry.id,
            "timestamp": entry.timestamp.isoformat(),
            "rawText": entry.raw_text,
            "parsedData": record_to_payload(entry.record),
        }
        for entry in entries
    ]
    return json.dumps(payload, ensure_ascii=False)


def entries_from_json(blob: str) -> list[WeeklyLogEntry]:
    """Deserialize the JSON array written by ``entries_to_json``.

    Args:
        blob: Stored JSON document.

    Returns:
        list[WeeklyLogEntry]: Entries in stored order.

    Raises:
        PersistenceCorruptionError: If the blob cannot be decoded.
    """
    try:
        payload = json.loads(blob)
    except (TypeError, ValueError) as exc:
        raise PersistenceCorruptionError(f"Invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise PersistenceCorruptionError("Stored history must be a list")

    entries = []
    for index, item in enumerate(payload):
        try:
            entries.append(_entry_from_payload(item))
        except (
            KeyError,
            TypeError,
            ValueError,
            OverflowError,
            OSError,
        ) as exc:
            raise PersistenceCorruptionError(
                f"Invalid entry at position {index}: {exc}"
            ) from exc
    return entries


def _entry_from_payload(item) -> WeeklyLogEntry:
    if not isinstance(item, dict):
        raise TypeError("entry must be an object")
    raw_text = item["rawText"]
    if not isinstance(raw_text, str):
        raise TypeError("rawText must be a string")
    return WeeklyLogEntry(
        id=str(item["id"]),
        timestamp=_parse_timestamp(item["timestamp"]),
        raw_text=raw_text,
        record=record_from_payload(item["parsedData"], strict=False),
    )


def _parse_timestamp(value) -> datetime:
    # Legacy histories stored epoch milliseconds.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = ["entries_to_json", "entries_from_json"]
