"""Application use cases package."""

from .clear_logs import ClearLogsUseCase
from .get_dashboard_metrics import GetDashboardMetricsUseCase
from .log_store import WeeklyLogStore
from .submit_weekly_log import SubmitWeeklyLogUseCase

__all__ = [
    "ClearLogsUseCase",
    "GetDashboardMetricsUseCase",
    "WeeklyLogStore",
    "SubmitWeeklyLogUseCase",
]
