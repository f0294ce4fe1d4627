"""Use case to extract a weekly log and append it to the history."""

from datetime import datetime

from src.application.ports.log_extractor import LogExtractorPort
from src.application.use_cases.log_store import WeeklyLogStore
from src.domain.models.farm import WeeklyLogEntry
from src.domain.services.validation import validate_record_signs
from src.infrastructure.logging.logger import get_app_logger


class SubmitWeeklyLogUseCase:
    """Run extraction on a raw log and store the resulting entry."""

    def __init__(
        self,
        extractor: LogExtractorPort,
        log_store: WeeklyLogStore,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            extractor: Port converting raw text into a financial record.
            log_store: Store receiving the new entry.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._extractor = extractor
        self._log_store = log_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        raw_text: str,
        now: datetime | None = None,
    ) -> WeeklyLogEntry:
        """Extract ``raw_text`` and append the entry.

        Extraction failures propagate before the store is touched.

        Args:
            raw_text: Weekly log as typed by the operator.
            now: Optional creation time, defaults to the current UTC time.

        Returns:
            WeeklyLogEntry: The appended entry.

        Raises:
            ValueError: If ``raw_text`` is blank.
            ExtractionError: If the log could not be interpreted.
        """
        if not raw_text or not raw_text.strip():
            raise ValueError("Weekly log text is empty")

        record = self._extractor.extract(raw_text)
        validate_record_signs(record, self._logger)

        entry = WeeklyLogEntry.create(raw_text, record, now=now)
        self._log_store.append(entry)
        self._logger.info(
            f"Weekly log {entry.id} stored: revenue={record.revenue.total}, "
            f"expenses={record.expenses.total}"
        )
        return entry


__all__ = ["SubmitWeeklyLogUseCase"]
