import logging
from typing import Callable, Optional

from apscheduler.schedulers.blocking import BlockingScheduler

from salesboard.automation.refresher import REFRESH_JOB_ID, DashboardRefresher
from salesboard.core.snapshot import RefreshState

log = logging.getLogger(__name__)


def start_scheduler(
    refresher: DashboardRefresher,
    on_refresh: Optional[Callable[[RefreshState], None]] = None,
) -> None:
    """
    Run the refresh loop in the foreground (CLI --watch).

    Runs one refresh immediately, then every ``refresher.interval_seconds``
    until interrupted.
    """

    def job() -> None:
        state = refresher.refresh_now()
        if state is not None and on_refresh is not None:
            on_refresh(state)

    scheduler = BlockingScheduler()

    log.info("Starting scheduler every %ss", refresher.interval_seconds)

    job()

    scheduler.add_job(
        job,
        trigger="interval",
        seconds=refresher.interval_seconds,
        id=REFRESH_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )

    log.info("Scheduler started. Press CTRL+C to stop.")

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        scheduler.shutdown(wait=False)
        log.info("Scheduler stopped.")
