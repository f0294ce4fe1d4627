"""Tests for the GetDashboardMetricsUseCase."""

from decimal import Decimal

from src.application.use_cases.get_dashboard_metrics import (
    GetDashboardMetricsUseCase,
)
from src.application.use_cases.log_store import WeeklyLogStore
from tests.conftest import make_entry, make_record


def test_execute_recomputes_from_full_history(kv_store, fake_logger):
    store = WeeklyLogStore(kv_store, logger=fake_logger)
    use_case = GetDashboardMetricsUseCase(store, logger=fake_logger)
    store.append(
        make_entry(make_record(morning_milk="1000", feed="600"), day=1)
    )

    first = use_case.execute()
    store.append(make_entry(make_record(operations="600"), day=8))
    second = use_case.execute()

    assert first.snapshot.profit == Decimal("400")
    assert second.snapshot.profit == Decimal("-200")
    assert second.burn_rate == Decimal("40")
    assert second.entry_count == 2


def test_execute_is_idempotent(kv_store, fake_logger):
    store = WeeklyLogStore(kv_store, logger=fake_logger)
    store.append(make_entry(make_record(owed="100", collected="100")))
    use_case = GetDashboardMetricsUseCase(store, logger=fake_logger)

    assert use_case.execute() == use_case.execute()
    assert use_case.execute().collection_rate == Decimal("50")
