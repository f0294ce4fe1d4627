"""Domain exceptions."""

EXTRACTION_FAILURE_MESSAGE = (
    "Could not interpret the farm log. "
    "Please ensure it contains numerical values."
)


class AgroPulseError(Exception):
    """Base class for dashboard errors."""


class ExtractionError(AgroPulseError):
    """The weekly log could not be turned into a financial record."""

    def __init__(self, message: str = EXTRACTION_FAILURE_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class PersistenceCorruptionError(AgroPulseError):
    """Stored log history could not be decoded."""


__all__ = [
    "EXTRACTION_FAILURE_MESSAGE",
    "AgroPulseError",
    "ExtractionError",
    "PersistenceCorruptionError",
]
