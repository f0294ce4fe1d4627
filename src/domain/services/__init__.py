"""Domain services package."""

from .aggregation import (
    aggregate_entries,
    combine_totals,
    compute_burn_rate,
    compute_collection_rate,
    compute_dashboard_metrics,
    compute_expense_shares,
    compute_financial_snapshot,
)
from .records import record_from_payload, record_to_payload
from .serialization import entries_from_json, entries_to_json
from .validation import validate_record_signs

__all__ = [
    "aggregate_entries",
    "combine_totals",
    "compute_burn_rate",
    "compute_collection_rate",
    "compute_dashboard_metrics",
    "compute_expense_shares",
    "compute_financial_snapshot",
    "record_from_payload",
    "record_to_payload",
    "entries_from_json",
    "entries_to_json",
    "validate_record_signs",
]
