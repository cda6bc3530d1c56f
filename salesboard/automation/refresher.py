import logging
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from salesboard.core.snapshot import RefreshState, SnapshotStore
from salesboard.data.source import DashboardDataSource, DataFetchError

logger = logging.getLogger(__name__)

REFRESH_JOB_ID = "salesboard-refresh"


class DashboardRefresher:
    """
    Keeps a SnapshotStore current by polling the data source.

    - First cycle runs immediately (initial load)
    - Then every ``interval_seconds`` on a background scheduler
    - Failure before any live data -> fallback snapshot
    - Failure after live data -> keep the stale snapshot, set ``stale_error``
    """

    def __init__(
        self,
        source: DashboardDataSource,
        store: Optional[SnapshotStore] = None,
        interval_seconds: float = 300,
    ):
        self.source = source
        self.store = store or SnapshotStore()
        self.interval_seconds = interval_seconds
        self._scheduler: Optional[BackgroundScheduler] = None

    # -------------------------------------------------
    # ONE CYCLE
    # -------------------------------------------------

    def refresh_now(self) -> Optional[RefreshState]:
        token = self.store.begin()

        try:
            data = self.source.fetch()
        except DataFetchError as e:
            logger.warning("Dashboard refresh %s failed: %s", token, e)

            if self.store.has_live_data:
                return self.store.mark_stale(token, str(e))

            logger.warning("No live data yet; serving fallback dataset")
            return self.store.publish(token, self.source.load_fallback(), is_fallback=True)

        state = self.store.publish(token, data)
        if state is not None:
            logger.info("Dashboard refresh %s applied", token)
        return state

    # -------------------------------------------------
    # SCHEDULING
    # -------------------------------------------------

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> Optional[RefreshState]:
        if self.running:
            return self.store.current

        state = self.refresh_now()

        scheduler = BackgroundScheduler()
        scheduler.add_job(
            self.refresh_now,
            trigger="interval",
            seconds=self.interval_seconds,
            id=REFRESH_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler

        logger.info("Dashboard refresher started (every %ss)", self.interval_seconds)
        return state

    def stop(self) -> None:
        if self._scheduler is None:
            return
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("Dashboard refresher stopped")
