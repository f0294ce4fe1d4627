"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import streamlit as st
import altair as alt
from sqlalchemy.exc import SQLAlchemyError

from src.adapters.interface.streamlit.presentation import (
    MILK_SESSIONS,
    expense_rows,
    format_burn_rate,
    format_currency,
    format_percent,
    history_rows,
    milk_chart_data,
    month_label,
    progress_fraction,
    snapshot_cards,
    status_label,
)
from src.application.ports.log_extractor import LogExtractorPort
from src.application.use_cases.clear_logs import ClearLogsUseCase
from src.application.use_cases.get_dashboard_metrics import (
    GetDashboardMetricsUseCase,
)
from src.application.use_cases.log_store import WeeklyLogStore
from src.application.use_cases.submit_weekly_log import (
    SubmitWeeklyLogUseCase,
)
from src.domain.errors import ExtractionError
from src.domain.models.farm import DashboardMetrics, WeeklyLogEntry
from src.infrastructure.container import build_log_extractor, build_log_store
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


STORE_KEY = "log_store"
INPUT_KEY = "log_input"
ERROR_KEY = "log_error"
PROCESSING_KEY = "log_processing"
CONFIRM_RESET_KEY = "confirm_reset"

MILK_COLORS = ["#06b6d4", "#3b82f6"]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas are importable for Altair charts."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies are missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (ndarray missing)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (Timestamp missing)."
    return True, None


@st.cache_resource(show_spinner=False)
def _load_log_extractor() -> LogExtractorPort:
    """Cached extraction adapter shared across reruns."""
    return build_log_extractor()


def _get_log_store() -> WeeklyLogStore:
    """Return the session's log store, loading history on first access."""
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = build_log_store()
    return st.session_state[STORE_KEY]


def _submit_log(store: WeeklyLogStore, raw_text: str) -> str | None:
    """Extract and store a weekly log.

    Args:
        store: Session log store.
        raw_text: Text from the input area.

    Returns:
        str | None: Error message to display, or None on success.
    """
    try:
        extractor = _load_log_extractor()
    except RuntimeError as exc:
        return str(exc)
    use_case = SubmitWeeklyLogUseCase(extractor=extractor, log_store=store)
    try:
        entry = use_case.execute(raw_text)
    except ExtractionError as exc:
        return exc.message
    except (SQLAlchemyError, OSError) as exc:
        get_app_logger().error(f"Failed to save weekly log: {exc}")
        return "Could not save the weekly log. Please try again."
    get_usage_logger().info(f"Weekly log submitted: {entry.id}")
    return None


def _handle_submit() -> None:
    """Button callback: process the text area content."""
    raw_text = st.session_state.get(INPUT_KEY, "")
    if not raw_text.strip():
        return
    st.session_state[PROCESSING_KEY] = True
    st.session_state[ERROR_KEY] = None
    try:
        with st.spinner("Analyzing weekly log..."):
            error = _submit_log(_get_log_store(), raw_text)
    finally:
        st.session_state[PROCESSING_KEY] = False
    if error:
        st.session_state[ERROR_KEY] = error
    else:
        st.session_state[INPUT_KEY] = ""


def _handle_reset() -> None:
    """Button callback: clear all data once the user confirmed."""
    if not st.session_state.get(CONFIRM_RESET_KEY):
        return
    removed = ClearLogsUseCase(_get_log_store()).execute()
    get_usage_logger().info(f"Log history reset ({removed} entries)")
    st.session_state[CONFIRM_RESET_KEY] = False
    st.session_state[ERROR_KEY] = None


def _render_header(metrics: DashboardMetrics, today: date) -> None:
    """Render the title, status line and reset controls."""
    title_col, reset_col = st.columns([3, 1])
    with title_col:
        st.title("AgroPulse Dashboard")
        st.caption(
            f"{status_label(metrics.entry_count)} · {month_label(today)}"
        )
    with reset_col:
        st.checkbox(
            "Reset current monthly data? This cannot be undone.",
            key=CONFIRM_RESET_KEY,
        )
        st.button(
            "Reset Base",
            on_click=_handle_reset,
            disabled=not st.session_state.get(CONFIRM_RESET_KEY, False),
        )


def _render_input_panel() -> None:
    """Render the weekly input area, error box and submit button."""
    st.sidebar.header("Weekly Data Input")
    raw_text = st.sidebar.text_area(
        "Weekly log",
        key=INPUT_KEY,
        height=180,
        placeholder=(
            "Paste logs here... e.g. 'Morning milk 450rs, "
            "evening milk 400rs, feed 200rs...'"
        ),
    )
    error = st.session_state.get(ERROR_KEY)
    if error:
        st.sidebar.error(error)
    st.sidebar.button(
        "Update Dashboard",
        on_click=_handle_submit,
        disabled=(
            st.session_state.get(PROCESSING_KEY, False)
            or not (raw_text or "").strip()
        ),
        type="primary",
    )


def _render_history(entries: Sequence[WeeklyLogEntry]) -> None:
    """Render recent weekly logs, newest first."""
    st.sidebar.subheader("Recent Monthly Logs")
    if not entries:
        st.sidebar.info("Waiting for initial entry...")
        return
    for row in history_rows(entries):
        st.sidebar.caption(f"{row['title']} · {row['date']}")
        st.sidebar.text(row["text"])


def _render_snapshot(metrics: DashboardMetrics) -> None:
    """Render Phase 1: the financial snapshot cards."""
    st.subheader("Phase 1 · Financial Snapshot")
    columns = st.columns(4)
    for column, card in zip(columns, snapshot_cards(metrics)):
        column.metric(card["label"], card["value"])


def _render_expense_analysis(metrics: DashboardMetrics) -> None:
    """Render Phase 2: spending distribution and burn rate."""
    st.subheader("Phase 2 · Expense Analysis")
    for row in expense_rows(metrics):
        st.markdown(f"**{row['label']}** · {row['amount']}")
        st.caption(row["share"])
        st.progress(row["progress"])
    st.metric(
        "Monthly Burn Rate",
        format_burn_rate(metrics.burn_rate),
    )


def _render_sales_trends(metrics: DashboardMetrics) -> None:
    """Render Phase 3: morning versus evening milk revenue."""
    st.subheader("Phase 3 · Sales Trends")
    ok, message = _check_altair_dependencies()
    if ok:
        st.altair_chart(_build_milk_chart(metrics), width="stretch")
    else:
        st.warning(message)
    am_col, pm_col = st.columns(2)
    am_col.metric(
        "Total AM",
        format_currency(metrics.totals.revenue.morning_milk),
    )
    pm_col.metric(
        "Total PM",
        format_currency(metrics.totals.revenue.evening_milk),
    )


def _build_milk_chart(metrics: DashboardMetrics) -> alt.Chart:
    """Build the grouped milk revenue bar chart."""
    data = milk_chart_data(metrics.totals)
    return alt.Chart(alt.Data(values=data)).mark_bar(
        size=40,
        cornerRadiusTopLeft=6,
        cornerRadiusTopRight=6,
    ).encode(
        x=alt.X("session:N", title=None, sort=list(MILK_SESSIONS)),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "session:N",
            scale=alt.Scale(domain=list(MILK_SESSIONS), range=MILK_COLORS),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("session:N"),
            alt.Tooltip("amount:Q", format=",.0f"),
        ],
    ).properties(
        height=260,
    ).configure_view(
        stroke=None
    )


def _render_credit_watchlist(metrics: DashboardMetrics) -> None:
    """Render Phase 4: collection rate and outstanding credit."""
    st.subheader("Phase 4 · Credit Watchlist")
    rate_col, detail_col = st.columns([1, 2])
    with rate_col:
        st.metric(
            "Debt Recovery Rate",
            format_percent(metrics.collection_rate),
        )
        st.caption("Efficiency of customer collections for the current month.")
    with detail_col:
        st.progress(progress_fraction(metrics.collection_rate))
        owed_col, collected_col = st.columns(2)
        owed_col.metric(
            "Current Owed",
            format_currency(metrics.totals.credit.owed),
        )
        collected_col.metric(
            "Recovered",
            format_currency(metrics.totals.credit.collected),
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="AgroPulse Dashboard", layout="wide")

    store = _get_log_store()
    _render_input_panel()
    _render_history(store.entries)

    metrics = GetDashboardMetricsUseCase(store).execute()
    _render_header(metrics, date.today())
    _render_snapshot(metrics)

    expense_col, sales_col = st.columns(2)
    with expense_col:
        _render_expense_analysis(metrics)
    with sales_col:
        _render_sales_trends(metrics)
    _render_credit_watchlist(metrics)


if __name__ == "__main__":  # pragma: no cover
    main()
