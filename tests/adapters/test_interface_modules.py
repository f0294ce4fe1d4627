"""Check the public names exposed by the dashboard's interface packages."""

from importlib import import_module


def test_interface_packages_export_nothing() -> None:
    for name in (
        "src.adapters.interface",
        "src.adapters.interface.streamlit",
    ):
        assert import_module(name).__all__ == []


def test_presentation_exports_every_formatting_helper() -> None:
    module = import_module("src.adapters.interface.streamlit.presentation")

    assert set(module.__all__) == {
        "round_whole",
        "format_currency",
        "format_signed_currency",
        "format_percent",
        "format_burn_rate",
        "status_label",
        "month_label",
        "progress_fraction",
        "snapshot_cards",
        "expense_rows",
        "milk_chart_data",
        "history_rows",
    }
    assert all(callable(getattr(module, name)) for name in module.__all__)


def test_logging_package_exposes_logger_accessors() -> None:
    module = import_module("src.infrastructure.logging")
    logger_module = import_module("src.infrastructure.logging.logger")

    assert module.__all__ == ["get_app_logger", "get_usage_logger"]
    assert module.get_app_logger is logger_module.get_app_logger
    assert module.get_usage_logger is logger_module.get_usage_logger
