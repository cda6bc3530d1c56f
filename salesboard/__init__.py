"""
salesboard v1.2

Live sales-performance dashboard: periodic data refresh with a
fallback dataset, and AI coaching advice over the current metrics.
"""

from .__version__ import __version__

# Keep package init lightweight: the LLM and scheduler stacks are
# imported from their own modules when needed.

from .core.models import (
    DailyTarget,
    DashboardData,
    PeriodProgress,
    SalesMetric,
    SalesRep,
)
from .config import DashboardConfig, load_config

__all__ = [
    "__version__",
    "DailyTarget",
    "DashboardData",
    "PeriodProgress",
    "SalesMetric",
    "SalesRep",
    "DashboardConfig",
    "load_config",
]
