"""Domain constants for farm finance analytics."""

BURN_RATE_DAYS = 30

DEFAULT_STORAGE_KEY = "agro_pulse_logs"

EXPENSE_CATEGORY_LABELS = (
    ("feed", "Animal Feed"),
    ("healthcare", "Healthcare"),
    ("operations", "Operations"),
)

CURRENCY_SYMBOL = "₹"


__all__ = [
    "BURN_RATE_DAYS",
    "DEFAULT_STORAGE_KEY",
    "EXPENSE_CATEGORY_LABELS",
    "CURRENCY_SYMBOL",
]
