"""Domain package for business rules and core models."""

from .constants import BURN_RATE_DAYS, DEFAULT_STORAGE_KEY
from .errors import (
    AgroPulseError,
    ExtractionError,
    PersistenceCorruptionError,
)
from .models import (
    CreditBreakdown,
    DashboardMetrics,
    ExpenseBreakdown,
    ExpenseShare,
    FarmFinancials,
    FinancialSnapshot,
    RevenueBreakdown,
    WeeklyLogEntry,
)
from .services import (
    aggregate_entries,
    combine_totals,
    compute_dashboard_metrics,
)

__all__ = [
    "BURN_RATE_DAYS",
    "DEFAULT_STORAGE_KEY",
    "AgroPulseError",
    "ExtractionError",
    "PersistenceCorruptionError",
    "CreditBreakdown",
    "DashboardMetrics",
    "ExpenseBreakdown",
    "ExpenseShare",
    "FarmFinancials",
    "FinancialSnapshot",
    "RevenueBreakdown",
    "WeeklyLogEntry",
    "aggregate_entries",
    "combine_totals",
    "compute_dashboard_metrics",
]
