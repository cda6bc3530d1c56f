import dataclasses

import pytest

from salesboard.core.models import (
    DailyTarget,
    DashboardData,
    DataValidationError,
    PeriodProgress,
    SalesRep,
)


def test_parses_full_payload(dashboard):
    assert dashboard.period_progress == PeriodProgress(current=3700, target=6500, unit="P")
    assert dashboard.daily_target == DailyTarget(target=800, unit="P")
    assert len(dashboard.individual_metrics) == 13
    assert dashboard.individual_metrics[0].label == "ペイトク加入率"
    assert dashboard.daily_sales_ranking[1].award_count == 5


@pytest.mark.parametrize(
    "field", ["periodProgress", "individualMetrics", "monthlySalesRanking"]
)
def test_missing_required_field_rejected(payload, field):
    del payload[field]

    with pytest.raises(DataValidationError) as exc:
        DashboardData.from_dict(payload)

    assert field in str(exc.value)


def test_non_object_payload_rejected():
    with pytest.raises(DataValidationError):
        DashboardData.from_dict(["not", "an", "object"])


def test_optional_sections_default(payload):
    del payload["dailyTarget"]
    del payload["dailySalesRanking"]

    data = DashboardData.from_dict(payload)

    assert data.daily_target == DailyTarget(target=0, unit="P")
    assert data.daily_sales_ranking == ()


def test_empty_metric_list_is_still_valid(payload):
    payload["individualMetrics"] = []
    assert DashboardData.from_dict(payload).individual_metrics == ()


def test_non_numeric_value_rejected(payload):
    payload["individualMetrics"][1]["current"] = "many"
    with pytest.raises(DataValidationError):
        DashboardData.from_dict(payload)


@pytest.mark.parametrize("value", [float("inf"), float("nan"), "NaN", "-inf", 10 ** 400])
def test_non_finite_values_rejected(payload, value):
    payload["individualMetrics"][1]["current"] = value
    with pytest.raises(DataValidationError):
        DashboardData.from_dict(payload)


@pytest.mark.parametrize("value", [float("inf"), float("nan")])
def test_non_finite_rank_rejected(payload, value):
    payload["monthlySalesRanking"][0]["rank"] = value
    with pytest.raises(DataValidationError):
        DashboardData.from_dict(payload)


def test_numeric_strings_are_coerced(payload):
    payload["periodProgress"]["current"] = "3700"
    assert DashboardData.from_dict(payload).period_progress.current == 3700.0


def test_rankings_sorted_by_rank(payload):
    payload["monthlySalesRanking"] = [
        {"rank": 3, "name": "高橋", "points": 760},
        {"rank": 1, "name": "佐藤", "points": 1250},
        {"rank": 2, "name": "鈴木", "points": 980},
    ]

    data = DashboardData.from_dict(payload)

    assert [rep.rank for rep in data.monthly_sales_ranking] == [1, 2, 3]


def test_duplicate_ranks_rejected(payload):
    payload["dailySalesRanking"][1]["rank"] = 1
    with pytest.raises(DataValidationError):
        DashboardData.from_dict(payload)


def test_snapshot_is_immutable(dashboard):
    with pytest.raises(dataclasses.FrozenInstanceError):
        dashboard.period_progress = PeriodProgress(0, 0)


def test_official_value_kept(payload):
    payload["periodProgress"]["official"] = 3500
    data = DashboardData.from_dict(payload)
    assert data.period_progress.official == 3500
    assert data.to_dict()["periodProgress"]["official"] == 3500


def test_to_dict_matches_wire_shape(payload, dashboard):
    assert dashboard.to_dict() == payload


def test_remaining_never_negative():
    assert PeriodProgress(current=7000, target=6500).remaining == 0
    assert PeriodProgress(current=3700, target=6500).remaining == 2800


def test_sales_rep_award_count_optional():
    rep = SalesRep.from_dict({"rank": 1, "name": "佐藤", "points": 1250})
    assert rep.award_count is None
    assert "awardCount" not in rep.to_dict()
