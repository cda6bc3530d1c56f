from typing import Iterable, Sequence

import pandas as pd
import streamlit as st

from salesboard.core.models import DailyTarget, PeriodProgress, SalesMetric, SalesRep
from salesboard.core.progress import (
    bar_percent,
    format_number,
    metrics_frame,
    progress_percent,
    ranking_frame,
    round_half_up,
)
from ui.config import (
    ADVICE_ERROR_HINT,
    ADVICE_ERROR_TITLE,
    IN_PROGRESS_COLOR,
    RANK_COLORS,
    SCORE_COLOR,
    TARGET_MET_COLOR,
)


def _bar(percent: float, color: str, height: str = "10px") -> str:
    return (
        f'<div style="background:#334155;border-radius:9999px;height:{height};overflow:hidden">'
        f'<div style="width:{percent:.1f}%;background:{color};height:{height};'
        f'border-radius:9999px"></div></div>'
    )


# -------------------------------------------------
# GOAL PROGRESS
# -------------------------------------------------
def render_goal_progress(daily: DailyTarget, period: PeriodProgress) -> None:
    left, right = st.columns([2, 3])

    with left:
        st.metric("本日の目標", f"{format_number(daily.target)} {daily.unit}")

    with right:
        percent = round_half_up(progress_percent(period.current, period.target))
        st.markdown(f"現在 **{percent}%**")
        st.markdown(
            _bar(bar_percent(period.current, period.target), IN_PROGRESS_COLOR),
            unsafe_allow_html=True,
        )

        progress_text = f"進捗: **{format_number(period.current)}** {period.unit}"
        if period.official is not None:
            progress_text += f"　(確定実績: **{format_number(period.official)}** {period.unit})"
        st.caption(
            f"{progress_text}　残り: **{format_number(period.remaining)}** {period.unit}"
        )


# -------------------------------------------------
# INDIVIDUAL METRICS
# -------------------------------------------------
def render_metrics(metrics: Sequence[SalesMetric], rate_labels: Iterable[str] = ()) -> None:
    frame = metrics_frame(metrics, rate_labels)
    if frame.empty:
        st.info("個別数値はまだありません。")
        return

    for row in frame.itertuples(index=False):
        color = TARGET_MET_COLOR if row.target_met else IN_PROGRESS_COLOR
        st.markdown(
            f'<div style="display:flex;justify-content:space-between;font-size:0.9rem">'
            f"<span>{row.label}</span>"
            f"<span>{row.current_display} / {row.target_display}</span></div>"
            + _bar(row.bar_pct, color),
            unsafe_allow_html=True,
        )


# -------------------------------------------------
# RANKINGS
# -------------------------------------------------
def render_ranking(title: str, reps: Sequence[SalesRep]) -> None:
    st.subheader(title)
    frame = ranking_frame(reps)
    if frame.empty:
        st.info("ランキングはまだありません。")
        return

    for row in frame.itertuples(index=False):
        rank_color = RANK_COLORS.get(row.style, RANK_COLORS["default"])
        score_color = rank_color if row.rank == 1 else SCORE_COLOR
        awards = f" ({int(row.award_count)}回)" if pd.notna(row.award_count) else ""
        st.markdown(
            f'<div style="display:flex;justify-content:space-between;align-items:center;'
            f'padding:0.5rem 0.75rem;background:#1e293b;border-radius:0.5rem;margin-bottom:0.5rem">'
            f'<span><b style="color:{rank_color};font-size:1.4rem">{row.rank}</b>'
            f"　<b>{row.name}</b>{awards}</span>"
            f'<span style="color:{score_color};font-weight:700">{format_number(row.points)} P</span>'
            f"</div>",
            unsafe_allow_html=True,
        )


# -------------------------------------------------
# AI ADVICE
# -------------------------------------------------
def render_advice(advice: Sequence[str]) -> None:
    for item in advice:
        st.markdown(f"● {item}")


def render_advice_error(message: str) -> None:
    st.error(f"**{ADVICE_ERROR_TITLE}**\n\n{message}")
    st.caption(ADVICE_ERROR_HINT)
