"""Application ports package."""

from .database import DatabaseEnginePort
from .key_value_store import KeyValueStorePort
from .log_extractor import LogExtractorPort

__all__ = [
    "DatabaseEnginePort",
    "KeyValueStorePort",
    "LogExtractorPort",
]
