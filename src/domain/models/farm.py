"""Domain models for weekly farm logs and their aggregates."""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
import uuid


ZERO = Decimal("0")


@dataclass(frozen=True)
class RevenueBreakdown:
    """Revenue sub-totals for one week (or an aggregate)."""

    morning_milk: Decimal = ZERO
    evening_milk: Decimal = ZERO
    misc_sales: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return the sum of all revenue fields."""
        return self.morning_milk + self.evening_milk + self.misc_sales


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Expense sub-totals for one week (or an aggregate)."""

    feed: Decimal = ZERO
    healthcare: Decimal = ZERO
    operations: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return the sum of all expense fields."""
        return self.feed + self.healthcare + self.operations


@dataclass(frozen=True)
class CreditBreakdown:
    """Credit extended to customers and credit recovered."""

    owed: Decimal = ZERO
    collected: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return owed plus collected."""
        return self.owed + self.collected


@dataclass(frozen=True)
class FarmFinancials:
    """Structured financial record extracted from a weekly log.

    The same shape holds the aggregate totals across all logged weeks.

    Attributes:
        revenue: Milk and miscellaneous sales.
        expenses: Feed, healthcare and operations costs.
        credit: Credit owed by customers and credit collected.
    """

    revenue: RevenueBreakdown = RevenueBreakdown()
    expenses: ExpenseBreakdown = ExpenseBreakdown()
    credit: CreditBreakdown = CreditBreakdown()

    @classmethod
    def zero(cls) -> "FarmFinancials":
        """Return a record with every field set to zero."""
        return cls()


@dataclass(frozen=True)
class WeeklyLogEntry:
    """One submitted weekly log and its extracted record.

    Attributes:
        id: Opaque unique identifier.
        timestamp: Creation time (UTC).
        raw_text: Text exactly as submitted by the operator.
        record: Structured record extracted from ``raw_text``.
    """

    id: str
    timestamp: datetime
    raw_text: str
    record: FarmFinancials

    @classmethod
    def create(
        cls,
        raw_text: str,
        record: FarmFinancials,
        now: datetime | None = None,
    ) -> "WeeklyLogEntry":
        """Build a new entry with a fresh identifier."""
        return cls(
            id=uuid.uuid4().hex,
            timestamp=_as_utc(now or datetime.now(timezone.utc)),
            raw_text=raw_text,
            record=record,
        )


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken as UTC, matching how stored blobs are read.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class FinancialSnapshot:
    """Headline revenue, expense and profit figures."""

    total_revenue: Decimal
    total_expense: Decimal

    @property
    def profit(self) -> Decimal:
        """Return revenue minus expense (may be negative)."""
        return self.total_revenue - self.total_expense

    @property
    def is_profitable(self) -> bool:
        return self.profit >= 0


@dataclass(frozen=True)
class ExpenseShare:
    """Share of total expense held by one category."""

    category: str
    label: str
    amount: Decimal
    percent_of_total: Decimal


@dataclass(frozen=True)
class DashboardMetrics:
    """Everything the dashboard renders, computed from the full log."""

    totals: FarmFinancials
    snapshot: FinancialSnapshot
    expense_shares: tuple[ExpenseShare, ...]
    collection_rate: Decimal
    burn_rate: Decimal
    entry_count: int

    @property
    def is_empty(self) -> bool:
        return self.entry_count == 0


__all__ = [
    "RevenueBreakdown",
    "ExpenseBreakdown",
    "CreditBreakdown",
    "FarmFinancials",
    "WeeklyLogEntry",
    "FinancialSnapshot",
    "ExpenseShare",
    "DashboardMetrics",
]
