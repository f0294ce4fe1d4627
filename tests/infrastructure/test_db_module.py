"""Tests for the infrastructure.db module."""

from src.infrastructure import db as db_module


def test_create_engine_passes_configuration(monkeypatch):
    """_create_engine should enable health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("sqlite:///farm.db")

    assert engine == "engine"
    assert captured["db_url"] == "sqlite:///farm.db"
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_engine_caches_engine(monkeypatch):
    """get_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)

    engine_one = db_module.get_engine("sqlite:///one.db")
    engine_two = db_module.get_engine("sqlite:///two.db")

    assert engine_one == "engine:sqlite:///one.db"
    assert engine_two is engine_one
    assert created == ["sqlite:///one.db"]


def test_get_engine_reads_settings_when_no_url(monkeypatch):
    monkeypatch.setattr(db_module, "_engine", None)
    monkeypatch.setattr(
        db_module.DashboardSettings,
        "from_env",
        classmethod(lambda cls: cls(db_url="sqlite:///env.db")),
    )
    monkeypatch.setattr(db_module, "_create_engine", lambda url: url)

    assert db_module.get_engine() == "sqlite:///env.db"


def test_adapter_delegates_to_get_engine(monkeypatch):
    calls = []
    monkeypatch.setattr(
        db_module,
        "get_engine",
        lambda url=None: calls.append(url) or "engine",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite:///x.db")

    assert adapter.get_engine() == "engine"
    assert calls == ["sqlite:///x.db"]
