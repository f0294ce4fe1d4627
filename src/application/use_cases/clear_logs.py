"""Use case to reset the weekly log history."""

from src.application.use_cases.log_store import WeeklyLogStore
from src.infrastructure.logging.logger import get_app_logger


class ClearLogsUseCase:
    """Remove all weekly log entries from the store and storage."""

    def __init__(self, log_store: WeeklyLogStore, logger=None) -> None:
        self._log_store = log_store
        self._logger = logger or get_app_logger()

    def execute(self) -> int:
        """Clear the history.

        Returns:
            int: Number of entries removed.
        """
        removed = len(self._log_store)
        self._log_store.clear()
        self._logger.info(f"Removed {removed} weekly log entries")
        return removed


__all__ = ["ClearLogsUseCase"]
