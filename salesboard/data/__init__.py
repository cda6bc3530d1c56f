from .fallback import FALLBACK_PAYLOAD, fallback_payload, load_fallback
from .source import DashboardDataSource, DataFetchError

__all__ = [
    "FALLBACK_PAYLOAD",
    "fallback_payload",
    "load_fallback",
    "DashboardDataSource",
    "DataFetchError",
]
