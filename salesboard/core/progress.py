"""
Progress arithmetic and value formatting shared by the UI and the advice prompt.
"""

import math
from typing import Iterable, Optional, Sequence

import pandas as pd

from .models import SalesMetric, SalesRep


RANK_STYLES = {
    1: "gold",
    2: "silver",
    3: "bronze",
}


def round_half_up(value: float) -> int:
    """0 for NaN/inf."""
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def progress_percent(current: float, target: float) -> float:
    """Achieved/target as a percentage. 0 when target <= 0 or either side is not finite."""
    if target is None or target <= 0:
        return 0.0
    if not (math.isfinite(current) and math.isfinite(target)):
        return 0.0
    return (current / target) * 100


def bar_percent(current: float, target: float) -> float:
    """Progress clamped to 0-100 for drawing a bar."""
    return min(max(progress_percent(current, target), 0.0), 100.0)


def is_target_met(current: float, target: float) -> bool:
    return target > 0 and current >= target


def is_rate_metric(metric: SalesMetric, rate_labels: Iterable[str] = ()) -> bool:
    return metric.label in set(rate_labels) or metric.unit == "%"


def format_number(value: Optional[float]) -> str:
    if value is None:
        return "-"
    try:
        value = float(value)
    except (TypeError, ValueError, OverflowError):
        return "-"
    if not math.isfinite(value):
        return "-"

    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_value(value: Optional[float], unit: str = "", rate: bool = False) -> str:
    if value is None:
        return "-"
    if rate:
        return f"{round_half_up(value * 100)}%"
    return f"{format_number(value)}{unit or ''}"


def format_metric_value(
    metric: SalesMetric,
    value: float,
    rate_labels: Iterable[str] = (),
) -> str:
    return format_value(value, metric.unit, rate=is_rate_metric(metric, rate_labels))


def rank_style(rank: int) -> str:
    return RANK_STYLES.get(rank, "default")


# -------------------------------------------------
# TABULAR VIEWS
# -------------------------------------------------

METRIC_COLUMNS = [
    "label",
    "current",
    "target",
    "unit",
    "progress_pct",
    "bar_pct",
    "target_met",
    "current_display",
    "target_display",
]

RANKING_COLUMNS = ["rank", "name", "points", "award_count", "style"]


def metrics_frame(
    metrics: Sequence[SalesMetric],
    rate_labels: Iterable[str] = (),
) -> pd.DataFrame:
    rate_labels = tuple(rate_labels)
    rows = []
    for m in metrics:
        rows.append({
            "label": m.label,
            "current": m.current,
            "target": m.target,
            "unit": m.unit,
            "progress_pct": round_half_up(progress_percent(m.current, m.target)),
            "bar_pct": bar_percent(m.current, m.target),
            "target_met": is_target_met(m.current, m.target),
            "current_display": format_metric_value(m, m.current, rate_labels),
            "target_display": format_metric_value(m, m.target, rate_labels),
        })
    return pd.DataFrame(rows, columns=METRIC_COLUMNS)


def ranking_frame(reps: Sequence[SalesRep]) -> pd.DataFrame:
    rows = [
        {
            "rank": rep.rank,
            "name": rep.name,
            "points": rep.points,
            "award_count": rep.award_count,
            "style": rank_style(rep.rank),
        }
        for rep in sorted(reps, key=lambda r: r.rank)
    ]
    return pd.DataFrame(rows, columns=RANKING_COLUMNS)
