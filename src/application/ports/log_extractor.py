"""Port for turning free-text weekly logs into financial records."""

from typing import Protocol

from src.domain.models.farm import FarmFinancials


class LogExtractorPort(Protocol):
    """Port exposing the text-to-record extraction service.

    Implementations return a fully populated record or raise
    ``ExtractionError``; partial records are never returned.
    """

    def extract(self, raw_text: str) -> FarmFinancials:
        """Return the financial record described by ``raw_text``.

        Raises:
            ExtractionError: If the log could not be interpreted.
        """


__all__ = ["LogExtractorPort"]
