"""Core dashboard model - snapshot types, progress math and the snapshot store."""

from .models import (
    DailyTarget,
    DashboardData,
    DataValidationError,
    PeriodProgress,
    SalesMetric,
    SalesRep,
)
from .snapshot import GenerationGate, RefreshState, SnapshotStore

__all__ = [
    "DailyTarget",
    "DashboardData",
    "DataValidationError",
    "PeriodProgress",
    "SalesMetric",
    "SalesRep",
    "GenerationGate",
    "RefreshState",
    "SnapshotStore",
]
