"""Domain models package."""

from .farm import (
    CreditBreakdown,
    DashboardMetrics,
    ExpenseBreakdown,
    ExpenseShare,
    FarmFinancials,
    FinancialSnapshot,
    RevenueBreakdown,
    WeeklyLogEntry,
)

__all__ = [
    "CreditBreakdown",
    "DashboardMetrics",
    "ExpenseBreakdown",
    "ExpenseShare",
    "FarmFinancials",
    "FinancialSnapshot",
    "RevenueBreakdown",
    "WeeklyLogEntry",
]
