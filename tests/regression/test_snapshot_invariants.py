import pytest
import requests

from salesboard.config.dashboard_config import DataSourceConfig
from salesboard.core.models import DashboardData
from salesboard.core.progress import progress_percent
from salesboard.data.fallback import FALLBACK_PAYLOAD, load_fallback
from salesboard.data.source import DashboardDataSource


# -------------------------------------------------
# Regression Tests — MUST NEVER BREAK
# -------------------------------------------------

@pytest.fixture
def fallback():
    return load_fallback()


def test_fallback_round_trips_through_validation(fallback):
    """
    The embedded dataset is also the canonical example of a valid payload.
    """
    assert DashboardData.from_dict(fallback.to_dict()) == fallback
    assert DashboardData.missing_fields(FALLBACK_PAYLOAD) == []


def test_fallback_ranks_are_unique_and_ordered(fallback):
    for ranking in (fallback.monthly_sales_ranking, fallback.daily_sales_ranking):
        ranks = [rep.rank for rep in ranking]
        assert ranks == sorted(set(ranks))
        assert ranks[0] == 1


def test_rank_one_has_most_monthly_points(fallback):
    points = [rep.points for rep in fallback.monthly_sales_ranking]
    assert points == sorted(points, reverse=True)


def test_every_fallback_metric_has_defined_progress(fallback):
    for metric in fallback.individual_metrics:
        assert progress_percent(metric.current, metric.target) >= 0


def test_refresh_is_total():
    """
    refresh() must return a snapshot for every failure mode, never raise.
    """

    class ExplodingSession:
        def get(self, url, **kwargs):
            raise requests.Timeout("timed out")

    source = DashboardDataSource(DataSourceConfig(url="https://example.test/exec"), session=ExplodingSession())

    assert source.refresh() == load_fallback()
