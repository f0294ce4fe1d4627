"""Pure formatting helpers for the Streamlit dashboard.

Nothing here touches Streamlit; the page module feeds these helpers with
``DashboardMetrics`` and weekly entries and renders the results.
"""

from collections.abc import Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import CURRENCY_SYMBOL
from src.domain.models.farm import (
    DashboardMetrics,
    FarmFinancials,
    WeeklyLogEntry,
)


MILK_SESSIONS = ("Morning", "Evening")


def round_whole(value: Decimal) -> Decimal:
    """Round half up to a whole number."""
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_currency(value: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format an amount with the currency symbol and thousands separators."""
    if value == value.to_integral():
        return f"{symbol}{value:,.0f}"
    return f"{symbol}{value:,.2f}"


def format_signed_currency(
    value: Decimal,
    symbol: str = CURRENCY_SYMBOL,
) -> str:
    """Format a profit with an explicit sign, e.g. ``+₹650`` or ``-₹200``."""
    sign = "+" if value >= 0 else "-"
    return f"{sign}{format_currency(abs(value), symbol)}"


def format_percent(value: Decimal) -> str:
    """Format a percentage rounded to a whole number."""
    rounded = round_whole(value)
    if rounded == 0:
        rounded = rounded.copy_abs()
    return f"{rounded:.0f}%"


def format_burn_rate(value: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format the daily burn rate, e.g. ``₹40/day``."""
    return f"{symbol}{round_whole(value):,.0f}/day"


def status_label(entry_count: int) -> str:
    """Return the header status for the number of logged weeks."""
    if entry_count == 0:
        return "Status: NIL (Ready)"
    return f"Status: Active / {entry_count} Wks"


def month_label(today: date) -> str:
    """Return the current month and year, e.g. ``March 2024``."""
    return today.strftime("%B %Y")


def progress_fraction(percent: Decimal) -> float:
    """Convert a percentage into a 0..1 value for progress bars."""
    fraction = float(percent) / 100
    return min(max(fraction, 0.0), 1.0)


def snapshot_cards(metrics: DashboardMetrics) -> list[dict[str, str]]:
    """Return the four headline cards of the financial snapshot."""
    snapshot = metrics.snapshot
    return [
        {
            "label": "Revenue",
            "value": format_currency(snapshot.total_revenue),
        },
        {
            "label": "Expenses",
            "value": format_currency(snapshot.total_expense),
        },
        {
            "label": "Net Profit",
            "value": format_signed_currency(snapshot.profit),
        },
        {
            "label": "Total Credit",
            "value": format_currency(metrics.totals.credit.owed),
        },
    ]


def expense_rows(metrics: DashboardMetrics) -> list[dict[str, object]]:
    """Return one row per expense category for the distribution panel."""
    return [
        {
            "label": share.label,
            "amount": format_currency(share.amount),
            "share": f"{format_percent(share.percent_of_total)} of total",
            "progress": (
                0.0
                if metrics.is_empty
                else progress_fraction(share.percent_of_total)
            ),
        }
        for share in metrics.expense_shares
    ]


def milk_chart_data(totals: FarmFinancials) -> list[dict[str, str | float]]:
    """Return Altair-ready rows comparing morning and evening milk sales."""
    amounts = (totals.revenue.morning_milk, totals.revenue.evening_milk)
    return [
        {"session": session, "amount": float(amount)}
        for session, amount in zip(MILK_SESSIONS, amounts)
    ]


def history_rows(
    entries: Sequence[WeeklyLogEntry],
) -> list[dict[str, str]]:
    """Return recent logs newest first, numbered in submission order."""
    total = len(entries)
    rows = []
    for index, entry in enumerate(reversed(entries)):
        rows.append(
            {
                "id": entry.id,
                "title": f"#{total - index} WEEKLY RECORD",
                "date": entry.timestamp.astimezone().strftime("%d/%m/%Y"),
                "text": f'"{entry.raw_text}"',
            }
        )
    return rows


__all__ = [
    "round_whole",
    "format_currency",
    "format_signed_currency",
    "format_percent",
    "format_burn_rate",
    "status_label",
    "month_label",
    "progress_fraction",
    "snapshot_cards",
    "expense_rows",
    "milk_chart_data",
    "history_rows",
]
