"""Aggregation of weekly farm logs into dashboard metrics.

Everything here is pure: metrics are recomputed from the full entry list on
every call and no intermediate state is kept between calls.
"""

from collections.abc import Iterable
from decimal import Decimal
from functools import reduce

from src.domain.constants import BURN_RATE_DAYS, EXPENSE_CATEGORY_LABELS
from src.domain.models.farm import (
    CreditBreakdown,
    DashboardMetrics,
    ExpenseBreakdown,
    ExpenseShare,
    FarmFinancials,
    FinancialSnapshot,
    RevenueBreakdown,
    WeeklyLogEntry,
)


HUNDRED = Decimal("100")


def combine_totals(left: FarmFinancials, right: FarmFinancials) -> FarmFinancials:
    """Add two records component-wise.

    Args:
        left: First record or running total.
        right: Record to add.

    Returns:
        FarmFinancials: Sum of every leaf field.
    """
    return FarmFinancials(
        revenue=RevenueBreakdown(
            morning_milk=left.revenue.morning_milk + right.revenue.morning_milk,
            evening_milk=left.revenue.evening_milk + right.revenue.evening_milk,
            misc_sales=left.revenue.misc_sales + right.revenue.misc_sales,
        ),
        expenses=ExpenseBreakdown(
            feed=left.expenses.feed + right.expenses.feed,
            healthcare=left.expenses.healthcare + right.expenses.healthcare,
            operations=left.expenses.operations + right.expenses.operations,
        ),
        credit=CreditBreakdown(
            owed=left.credit.owed + right.credit.owed,
            collected=left.credit.collected + right.credit.collected,
        ),
    )


def aggregate_entries(entries: Iterable[WeeklyLogEntry]) -> FarmFinancials:
    """Fold entries in stored order into aggregate totals.

    Args:
        entries: Weekly log entries.

    Returns:
        FarmFinancials: Component-wise totals, all zero for no entries.
    """
    return reduce(
        combine_totals,
        (entry.record for entry in entries),
        FarmFinancials.zero(),
    )


def compute_financial_snapshot(totals: FarmFinancials) -> FinancialSnapshot:
    """Return total revenue, total expense and profit."""
    return FinancialSnapshot(
        total_revenue=totals.revenue.total,
        total_expense=totals.expenses.total,
    )


def compute_expense_shares(
    totals: FarmFinancials,
) -> tuple[ExpenseShare, ...]:
    """Return each expense category as a percentage of total expense.

    With no expense recorded the denominator is 1, so every share is 0
    and the shares sum to 0 rather than 100.

    Args:
        totals: Aggregate totals.

    Returns:
        tuple[ExpenseShare, ...]: Feed, healthcare and operations shares.
    """
    denominator = totals.expenses.total or Decimal("1")
    shares = []
    for category, label in EXPENSE_CATEGORY_LABELS:
        amount = getattr(totals.expenses, category)
        shares.append(
            ExpenseShare(
                category=category,
                label=label,
                amount=amount,
                percent_of_total=amount / denominator * HUNDRED,
            )
        )
    return tuple(shares)


def compute_collection_rate(credit: CreditBreakdown) -> Decimal:
    """Return collected / (owed + collected) as a percentage, 0 if empty."""
    denominator = credit.total
    if denominator <= 0:
        return Decimal("0")
    return credit.collected / denominator * HUNDRED


def compute_burn_rate(total_expense: Decimal) -> Decimal:
    """Return the daily spend over a fixed 30-day month."""
    return total_expense / BURN_RATE_DAYS


def compute_dashboard_metrics(
    entries: Iterable[WeeklyLogEntry],
) -> DashboardMetrics:
    """Compute every dashboard metric from the full entry list.

    Args:
        entries: Weekly log entries in stored order.

    Returns:
        DashboardMetrics: Totals and derived metrics.
    """
    entries = list(entries)
    totals = aggregate_entries(entries)
    snapshot = compute_financial_snapshot(totals)
    return DashboardMetrics(
        totals=totals,
        snapshot=snapshot,
        expense_shares=compute_expense_shares(totals),
        collection_rate=compute_collection_rate(totals.credit),
        burn_rate=compute_burn_rate(snapshot.total_expense),
        entry_count=len(entries),
    )


__all__ = [
    "combine_totals",
    "aggregate_entries",
    "compute_financial_snapshot",
    "compute_expense_shares",
    "compute_collection_rate",
    "compute_burn_rate",
    "compute_dashboard_metrics",
]
