"""Tests for the composition root."""

import pytest

from src.application.use_cases.log_store import WeeklyLogStore
from src.domain.services.serialization import entries_to_json
from src.infrastructure import container
from src.infrastructure.settings import DashboardSettings
from tests.conftest import InMemoryKeyValueStore, make_entry, make_record


def test_build_log_store_loads_history():
    entry = make_entry(make_record(feed="10"))
    storage = InMemoryKeyValueStore({"farm": entries_to_json([entry])})
    settings = DashboardSettings(db_url="sqlite://", storage_key="farm")

    store = container.build_log_store(storage=storage, settings=settings)

    assert isinstance(store, WeeklyLogStore)
    assert store.entries == (entry,)


def test_build_log_extractor_requires_api_key():
    settings = DashboardSettings(db_url="sqlite://", gemini_api_key=None)

    with pytest.raises(RuntimeError, match="GEMINI_API_KEY"):
        container.build_log_extractor(settings)


def test_build_log_extractor_uses_settings(monkeypatch):
    captured = {}

    def _fake_extractor(api_key, model, logger):
        captured.update(api_key=api_key, model=model)
        return "extractor"

    monkeypatch.setattr(container, "GeminiLogExtractor", _fake_extractor)
    settings = DashboardSettings(
        db_url="sqlite://",
        gemini_api_key="key",
        gemini_model="gemini-test",
    )

    assert container.build_log_extractor(settings) == "extractor"
    assert captured == {"api_key": "key", "model": "gemini-test"}


def test_build_key_value_store_wraps_db_port():
    db_port = object()

    kv_store = container.build_key_value_store(db_port)

    assert kv_store._db_port is db_port
