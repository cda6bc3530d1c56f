from .loader import load_config, build_dashboard_config
from .defaults import DEFAULT_CONFIG
from .dashboard_config import (
    AdviceConfig,
    DashboardConfig,
    DataSourceConfig,
    DisplayConfig,
)

__all__ = [
    "load_config",
    "build_dashboard_config",
    "DEFAULT_CONFIG",
    "AdviceConfig",
    "DashboardConfig",
    "DataSourceConfig",
    "DisplayConfig",
]
