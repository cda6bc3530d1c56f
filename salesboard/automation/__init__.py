from .refresher import DashboardRefresher

__all__ = ["DashboardRefresher"]
