"""Conversion between financial records and JSON-style payloads.

Payloads use the camelCase field names shared by the extraction service and
the persisted history blob::

    {
        "revenue": {"morningMilk": .., "eveningMilk": .., "miscSales": ..},
        "expenses": {"feed": .., "healthcare": .., "operations": ..},
        "credit": {"owed": .., "collected": ..},
    }
"""

from collections.abc import Mapping
from decimal import Decimal

from src.domain.models.farm import (
    CreditBreakdown,
    ExpenseBreakdown,
    FarmFinancials,
    RevenueBreakdown,
)
from src.utils.decimal_utils import coerce_decimal


REVENUE_FIELDS = (
    ("morningMilk", "morning_milk"),
    ("eveningMilk", "evening_milk"),
    ("miscSales", "misc_sales"),
)
EXPENSE_FIELDS = (
    ("feed", "feed"),
    ("healthcare", "healthcare"),
    ("operations", "operations"),
)
CREDIT_FIELDS = (
    ("owed", "owed"),
    ("collected", "collected"),
)

SECTIONS = (
    ("revenue", RevenueBreakdown, REVENUE_FIELDS),
    ("expenses", ExpenseBreakdown, EXPENSE_FIELDS),
    ("credit", CreditBreakdown, CREDIT_FIELDS),
)


def record_from_payload(payload, *, strict: bool = True) -> FarmFinancials:
    """Build a FarmFinancials record from a decoded JSON payload.

    Args:
        payload: Mapping with ``revenue``, ``expenses`` and ``credit``.
        strict: When true every section and field must be present. When
            false, missing sections or fields default to zero.

    Returns:
        FarmFinancials: Parsed record.

    Raises:
        ValueError: If the payload does not have the expected shape or a
            value is not a finite number.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"Expected an object, got {type(payload).__name__}")

    sections = {}
    for section_name, section_cls, fields in SECTIONS:
        raw_section = payload.get(section_name)
        if raw_section is None:
            if strict:
                raise ValueError(f"Missing section: {section_name}")
            raw_section = {}
        if not isinstance(raw_section, Mapping):
            raise ValueError(f"Section {section_name} must be an object")
        values = {}
        for key, attribute in fields:
            if strict and key not in raw_section:
                raise ValueError(f"Missing field: {section_name}.{key}")
            values[attribute] = _read_amount(raw_section.get(key))
        sections[section_name] = section_cls(**values)
    return FarmFinancials(**sections)


def record_to_payload(record: FarmFinancials) -> dict[str, dict[str, str]]:
    """Return the payload form of a record with amounts as strings."""
    payload: dict[str, dict[str, str]] = {}
    for section_name, _, fields in SECTIONS:
        section = getattr(record, section_name)
        payload[section_name] = {
            key: str(getattr(section, attribute)) for key, attribute in fields
        }
    return payload


def _read_amount(value) -> Decimal:
    amount = coerce_decimal(value)
    if not amount.is_finite():
        raise ValueError(f"Amount is not finite: {value!r}")
    return amount


__all__ = ["record_from_payload", "record_to_payload"]
