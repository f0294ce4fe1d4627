"""Tests for record payload conversion."""

from decimal import Decimal

import pytest

from src.domain.services.records import record_from_payload, record_to_payload
from tests.conftest import make_record


def _payload():
    return {
        "revenue": {"morningMilk": 450, "eveningMilk": 400.5, "miscSales": 0},
        "expenses": {"feed": 200, "healthcare": 0, "operations": 35},
        "credit": {"owed": 100, "collected": 0},
    }


def test_strict_payload_builds_record():
    record = record_from_payload(_payload(), strict=True)

    assert record.revenue.morning_milk == Decimal("450")
    assert record.revenue.evening_milk == Decimal("400.5")
    assert record.expenses.operations == Decimal("35")
    assert record.credit.owed == Decimal("100")


def test_strict_payload_rejects_missing_field():
    payload = _payload()
    del payload["expenses"]["healthcare"]

    with pytest.raises(ValueError, match="expenses.healthcare"):
        record_from_payload(payload, strict=True)


def test_strict_payload_rejects_missing_section():
    payload = _payload()
    del payload["credit"]

    with pytest.raises(ValueError, match="credit"):
        record_from_payload(payload, strict=True)


def test_lenient_payload_defaults_missing_values_to_zero():
    payload = {"revenue": {"morningMilk": "12"}, "credit": {"owed": None}}

    record = record_from_payload(payload, strict=False)

    assert record.revenue.morning_milk == Decimal("12")
    assert record.revenue.evening_milk == 0
    assert record.expenses.total == 0
    assert record.credit.owed == 0


@pytest.mark.parametrize("bad_value", ["lots", "NaN", "Infinity", True])
def test_payload_rejects_non_numeric_values(bad_value):
    payload = _payload()
    payload["revenue"]["miscSales"] = bad_value

    with pytest.raises(ValueError):
        record_from_payload(payload, strict=True)


def test_payload_rejects_non_object():
    with pytest.raises(ValueError):
        record_from_payload(["not", "a", "record"])


def test_record_to_payload_uses_camel_case_strings():
    record = make_record(morning_milk="450.25", collected="5")

    payload = record_to_payload(record)

    assert payload["revenue"]["morningMilk"] == "450.25"
    assert payload["credit"]["collected"] == "5"
    assert set(payload["expenses"]) == {"feed", "healthcare", "operations"}
