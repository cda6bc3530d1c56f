import logging
import sys
from pathlib import Path

import streamlit as st

# -------------------------------------------------
# PATH FIX (REQUIRED FOR STREAMLIT)
# -------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from salesboard.narrative.advice import AdviceSlot
from salesboard.utils.logger import get_logger
from ui.backend import DashboardBackend
from ui.components import (
    render_advice,
    render_advice_error,
    render_goal_progress,
    render_metrics,
    render_ranking,
)
from ui.config import (
    ADVICE_LOADING_TEXT,
    APP_NAME,
    APP_SUBTITLE,
    FALLBACK_NOTICE,
    LOAD_ERROR,
    LOADING_TEXT,
    STALE_BANNER,
)

get_logger("salesboard")
log = logging.getLogger("salesboard.ui")


# -------------------------------------------------
# BACKEND (one per server process)
# -------------------------------------------------
@st.cache_resource(show_spinner=False)
def get_backend() -> DashboardBackend:
    backend = DashboardBackend()
    backend.start()
    return backend


# -------------------------------------------------
# UI CONFIG
# -------------------------------------------------
st.set_page_config(
    page_title=APP_NAME,
    page_icon="📊",
    layout="wide",
)

st.title(APP_NAME)
st.caption(APP_SUBTITLE)

# Initial load blocks; later refreshes happen in the background.
with st.spinner(LOADING_TEXT):
    backend = get_backend()


def _advice_section(state) -> None:
    st.subheader("✨ AI アドバイス")

    if "advisor" not in st.session_state:
        st.session_state["advisor"] = backend.advice_coordinator()
        st.session_state["advice_slot"] = AdviceSlot()
    slot = st.session_state["advice_slot"]

    # Recompute only when the snapshot object changes
    if slot.needs_update(state.data):
        with st.spinner(ADVICE_LOADING_TEXT):
            backend.update_advice(slot, st.session_state["advisor"], state)
        if slot.error is not None and slot.data is state.data:
            log.error("Failed to fetch AI advice: %s", slot.error)

    if slot.error is not None:
        render_advice_error(slot.error.user_message)
    elif slot.advice:
        render_advice(slot.advice)


@st.fragment(run_every=backend.refresh_interval_seconds)
def dashboard() -> None:
    state = backend.state
    if state is None:
        st.error(LOAD_ERROR)
        return

    if state.stale_error:
        st.warning(STALE_BANNER)
    if state.is_fallback:
        st.info(FALLBACK_NOTICE)

    data = state.data
    main_col, metrics_col = st.columns([3, 2], gap="large")

    with main_col:
        st.subheader("🎯 本日の目標 & 期間進捗")
        render_goal_progress(data.daily_target, data.period_progress)

        monthly_col, daily_col = st.columns(2)
        with monthly_col:
            render_ranking("👥 月間ランキング", data.monthly_sales_ranking)
        with daily_col:
            render_ranking("👥 Dailyランキング", data.daily_sales_ranking)

        _advice_section(state)

    with metrics_col:
        st.subheader("📊 個別数値")
        render_metrics(data.individual_metrics, backend.rate_labels)

    st.caption(f"最終更新: {state.refreshed_at:%Y-%m-%d %H:%M:%S} UTC")


dashboard()
