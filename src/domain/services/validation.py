"""Domain validation helpers."""

from logging import Logger

from src.domain.models.farm import FarmFinancials
from src.domain.services.records import SECTIONS


def validate_record_signs(record: FarmFinancials, logger: Logger) -> None:
    """Warn when a record holds negative amounts.

    Negative values are kept as-is; the aggregation still adds them.

    Args:
        record: Record to inspect.
        logger: Logger used for warnings.
    """
    for section_name, _, fields in SECTIONS:
        section = getattr(record, section_name)
        for key, attribute in fields:
            amount = getattr(section, attribute)
            if amount < 0:
                logger.warning(
                    f"Negative amount for {section_name}.{key}: {amount}"
                )


__all__ = ["validate_record_signs"]
