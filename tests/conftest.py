"""Shared fixtures for the dashboard test suite."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models.farm import (
    CreditBreakdown,
    ExpenseBreakdown,
    FarmFinancials,
    RevenueBreakdown,
    WeeklyLogEntry,
)


class InMemoryKeyValueStore:
    """Dict-backed stand-in for the durable key-value store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.set_calls = 0

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


def make_record(
    morning_milk="0",
    evening_milk="0",
    misc_sales="0",
    feed="0",
    healthcare="0",
    operations="0",
    owed="0",
    collected="0",
) -> FarmFinancials:
    return FarmFinancials(
        revenue=RevenueBreakdown(
            morning_milk=Decimal(morning_milk),
            evening_milk=Decimal(evening_milk),
            misc_sales=Decimal(misc_sales),
        ),
        expenses=ExpenseBreakdown(
            feed=Decimal(feed),
            healthcare=Decimal(healthcare),
            operations=Decimal(operations),
        ),
        credit=CreditBreakdown(
            owed=Decimal(owed),
            collected=Decimal(collected),
        ),
    )


def make_entry(
    record: FarmFinancials,
    raw_text: str = "weekly log",
    day: int = 1,
) -> WeeklyLogEntry:
    return WeeklyLogEntry.create(
        raw_text,
        record,
        now=datetime(2024, 3, day, 8, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def fake_logger() -> MagicMock:
    return MagicMock()
