"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.key_value_store import KeyValueStorePort
from src.application.ports.log_extractor import LogExtractorPort
from src.application.use_cases.log_store import WeeklyLogStore
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.gemini_log_extractor import GeminiLogExtractor
from src.infrastructure.key_value_store import SqlAlchemyKeyValueStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def build_database_adapter(
    settings: DashboardSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or DashboardSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_key_value_store(
    db_port: DatabaseEnginePort | None = None,
) -> KeyValueStorePort:
    """Return the key-value store holding the log history."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyKeyValueStore(resolved_db)


def build_log_store(
    storage: KeyValueStorePort | None = None,
    settings: DashboardSettings | None = None,
) -> WeeklyLogStore:
    """Return a log store with its history loaded from storage."""
    resolved = settings or DashboardSettings.from_env()
    resolved_storage = storage or build_key_value_store(
        build_database_adapter(resolved)
    )
    store = WeeklyLogStore(
        resolved_storage,
        storage_key=resolved.storage_key,
        logger=get_app_logger(),
    )
    store.load()
    return store


def build_log_extractor(
    settings: DashboardSettings | None = None,
) -> LogExtractorPort:
    """Return the configured extraction adapter."""
    resolved = settings or DashboardSettings.from_env()
    if not resolved.gemini_api_key:
        raise RuntimeError(
            "Log extraction requires a GEMINI_API_KEY value."
        )
    return GeminiLogExtractor(
        api_key=resolved.gemini_api_key,
        model=resolved.gemini_model,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_key_value_store",
    "build_log_store",
    "build_log_extractor",
]
