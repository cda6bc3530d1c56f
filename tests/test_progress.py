import pytest

from salesboard.core.models import SalesMetric, SalesRep
from salesboard.core.progress import (
    bar_percent,
    format_metric_value,
    format_number,
    format_value,
    is_rate_metric,
    is_target_met,
    metrics_frame,
    progress_percent,
    rank_style,
    ranking_frame,
    round_half_up,
)


PAYTOKU = SalesMetric(label="ペイトク加入率", current=0.45, target=0.60, unit="%")


@pytest.mark.parametrize("target", [0, -5])
def test_zero_or_negative_target_gives_zero_progress(target):
    assert progress_percent(10, target) == 0
    assert bar_percent(10, target) == 0
    assert is_target_met(10, target) is False


def test_target_met_when_current_reaches_target():
    assert is_target_met(60, 60) is True
    assert is_target_met(65, 60) is True
    assert is_target_met(59, 60) is False


def test_bar_is_capped_at_100():
    assert bar_percent(65, 60) == 100
    assert progress_percent(65, 60) == pytest.approx(108.33, abs=0.01)


def test_round_half_up():
    assert round_half_up(44.5) == 45
    assert round_half_up(45.49) == 45
    assert round_half_up(0.5) == 1


def test_non_finite_values_give_zero_progress():
    assert round_half_up(float("nan")) == 0
    assert round_half_up(float("inf")) == 0
    assert progress_percent(float("nan"), 40) == 0
    assert progress_percent(10, float("inf")) == 0
    assert bar_percent(float("inf"), 40) == 0
    assert format_number(float("nan")) == "-"


def test_rate_metric_formats_as_percentage():
    assert format_metric_value(PAYTOKU, PAYTOKU.current) == "45%"
    assert format_metric_value(PAYTOKU, PAYTOKU.target) == "60%"


def test_rate_metric_detected_by_label_without_unit():
    metric = SalesMetric(label="ペイトク加入率", current=0.45, target=0.6)
    assert is_rate_metric(metric, ["ペイトク加入率"])
    assert not is_rate_metric(metric)
    assert format_metric_value(metric, 0.45, ["ペイトク加入率"]) == "45%"


def test_format_number_uses_thousands_separator():
    assert format_number(1250000) == "1,250,000"
    assert format_number(1250.0) == "1,250"
    assert format_number(3.5) == "3.5"
    assert format_number(None) == "-"


def test_format_value_appends_unit():
    assert format_value(1250000, "円") == "1,250,000円"
    assert format_value(18, "") == "18"
    assert format_value(310, "P") == "310P"


def test_metrics_frame(dashboard):
    frame = metrics_frame(dashboard.individual_metrics, ["ペイトク加入率"])

    assert len(frame) == 13
    paytoku = frame.iloc[0]
    assert paytoku["current_display"] == "45%"
    assert paytoku["progress_pct"] == 75

    kishuhen = frame[frame["label"] == "機種変"].iloc[0]
    assert bool(kishuhen["target_met"]) is True
    assert kishuhen["bar_pct"] == 100

    assert int(frame["target_met"].sum()) == 1


def test_ranking_frame_orders_and_styles_rank_one():
    reps = [
        SalesRep(rank=2, name="鈴木", points=980),
        SalesRep(rank=1, name="佐藤", points=1250),
    ]

    frame = ranking_frame(reps)

    assert list(frame["name"]) == ["佐藤", "鈴木"]
    assert frame.iloc[0]["style"] == "gold"
    assert rank_style(1) == "gold"
    assert rank_style(2) != rank_style(1)
    assert rank_style(7) == "default"


def test_empty_frames_keep_columns():
    assert list(metrics_frame([]).columns)[0] == "label"
    assert ranking_frame([]).empty
