"""Use case to compute dashboard metrics from the weekly log history."""

from src.application.use_cases.log_store import WeeklyLogStore
from src.domain.models.farm import DashboardMetrics
from src.domain.services.aggregation import compute_dashboard_metrics
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardMetricsUseCase:
    """Recompute totals and derived metrics from the full history."""

    def __init__(self, log_store: WeeklyLogStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            log_store: Store holding the weekly entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._log_store = log_store
        self._logger = logger or get_app_logger()

    def execute(self) -> DashboardMetrics:
        """Return metrics for every stored entry."""
        metrics = compute_dashboard_metrics(self._log_store.entries)
        self._logger.debug(
            f"Dashboard metrics computed over {metrics.entry_count} entries: "
            f"profit={metrics.snapshot.profit}"
        )
        return metrics


__all__ = ["GetDashboardMetricsUseCase"]
