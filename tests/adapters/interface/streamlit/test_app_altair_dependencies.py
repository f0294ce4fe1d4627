"""Tests for the milk sales chart and its optional chart dependencies."""

import sys
import types
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.domain.services.aggregation import compute_dashboard_metrics
from tests.conftest import make_entry, make_record


def _metrics():
    return compute_dashboard_metrics(
        [make_entry(make_record(morning_milk="1450", evening_milk="400"))]
    )


def _fake_streamlit():
    fake_st = MagicMock()
    fake_st.columns.side_effect = lambda count: [
        MagicMock() for _ in range(count)
    ]
    return fake_st


def test_sales_trends_warns_when_chart_libraries_are_missing(monkeypatch):
    fake_st = _fake_streamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "Altair dependencies are missing: pandas"),
    )

    app._render_sales_trends(_metrics())

    fake_st.warning.assert_called_once_with(
        "Altair dependencies are missing: pandas"
    )
    fake_st.altair_chart.assert_not_called()


def test_sales_trends_renders_chart_and_session_totals(monkeypatch):
    fake_st = _fake_streamlit()
    am_col, pm_col = MagicMock(), MagicMock()
    fake_st.columns.side_effect = None
    fake_st.columns.return_value = [am_col, pm_col]
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_check_altair_dependencies", lambda: (True, None))
    monkeypatch.setattr(app, "_build_milk_chart", lambda metrics: "chart")

    app._render_sales_trends(_metrics())

    fake_st.altair_chart.assert_called_once_with("chart", width="stretch")
    fake_st.warning.assert_not_called()
    am_col.metric.assert_called_once_with("Total AM", "₹1,450")
    pm_col.metric.assert_called_once_with("Total PM", "₹400")


def test_milk_chart_plots_both_sessions():
    chart = app._build_milk_chart(_metrics())

    spec = chart.to_dict()
    assert spec["mark"]["type"] == "bar"
    assert spec["encoding"]["x"]["field"] == "session"
    assert spec["encoding"]["x"]["sort"] == ["Morning", "Evening"]
    assert spec["encoding"]["y"]["field"] == "amount"


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "missing"),
    [
        ({}, {"Timestamp": object}, "numpy"),
        ({"ndarray": object}, {}, "pandas"),
    ],
)
def test_incomplete_chart_libraries_are_reported(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    missing,
) -> None:
    monkeypatch.setitem(
        sys.modules, "numpy", types.SimpleNamespace(**numpy_attrs)
    )
    monkeypatch.setitem(
        sys.modules, "pandas", types.SimpleNamespace(**pandas_attrs)
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert missing in message
