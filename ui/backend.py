from typing import Optional

from salesboard.automation.refresher import DashboardRefresher
from salesboard.config.loader import build_dashboard_config, load_config
from salesboard.core.snapshot import RefreshState
from salesboard.data.source import DashboardDataSource
from salesboard.narrative.advice import (
    AdviceCoordinator,
    AdviceSlot,
    build_advice_generator,
)


class DashboardBackend:
    """
    UI-safe wrapper around both pipelines.

    Owns the background refresher for one Streamlit server process and
    hands out advice coordinators.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config = build_dashboard_config(load_config(config_path))

        self.source = DashboardDataSource(self.config.data_source)
        self.refresher = DashboardRefresher(
            self.source,
            interval_seconds=self.config.data_source.refresh_interval_seconds,
        )

    # -------------------------------------------------
    # DATA
    # -------------------------------------------------

    def start(self) -> Optional[RefreshState]:
        return self.refresher.start()

    def stop(self) -> None:
        self.refresher.stop()
        self.source.close()

    @property
    def state(self) -> Optional[RefreshState]:
        return self.refresher.store.current

    @property
    def refresh_interval_seconds(self) -> float:
        return self.config.data_source.refresh_interval_seconds

    @property
    def rate_labels(self):
        return self.config.display.rate_labels

    # -------------------------------------------------
    # ADVICE
    # -------------------------------------------------

    def advice_coordinator(self) -> AdviceCoordinator:
        """One per browser session."""
        return AdviceCoordinator(lambda: build_advice_generator(self.config))

    @staticmethod
    def update_advice(
        slot: AdviceSlot,
        coordinator: AdviceCoordinator,
        state: RefreshState,
    ) -> None:
        """Settles ``slot`` on advice or an AdviceError; a superseded request leaves it as is."""
        slot.update(coordinator, state.data, source_generation=state.generation)
