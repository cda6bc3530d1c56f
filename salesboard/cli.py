"""
salesboard CLI
Headless access to the dashboard pipelines (refresh, advice, watch).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from salesboard.__version__ import __version__
from salesboard.config.loader import build_dashboard_config, load_config
from salesboard.utils.logger import get_logger

logger = logging.getLogger(__name__)


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def run_once(config_path: Optional[str] = None, with_advice: bool = False) -> dict:
    """
    One refresh cycle (and optionally one advice call).

    Returns:
        {
            "data": <DashboardData dict>,
            "is_fallback": <bool>,
            "advice": <list[str] or None>
        }

    Raises AdviceError when advice is requested and cannot be produced.
    """
    from salesboard.automation.refresher import DashboardRefresher
    from salesboard.data.source import DashboardDataSource

    config = build_dashboard_config(load_config(config_path))

    source = DashboardDataSource(config.data_source)
    try:
        state = DashboardRefresher(source).refresh_now()
    finally:
        source.close()

    result = {
        "data": state.data.to_dict(),
        "is_fallback": state.is_fallback,
        "advice": None,
    }

    if with_advice:
        from salesboard.narrative.advice import build_advice_generator

        generator = build_advice_generator(config)
        result["advice"] = generator.generate_for(state.data)

    return result


def _watch(config_path: Optional[str]) -> None:
    from salesboard.automation.refresher import DashboardRefresher
    from salesboard.automation.scheduler import start_scheduler
    from salesboard.data.source import DashboardDataSource

    config = build_dashboard_config(load_config(config_path))
    refresher = DashboardRefresher(
        DashboardDataSource(config.data_source),
        interval_seconds=config.data_source.refresh_interval_seconds,
    )

    def report(state) -> None:
        data = state.data
        logger.info(
            "Generation %s: period %s/%s%s, fallback=%s, stale=%s",
            state.generation,
            data.period_progress.current,
            data.period_progress.target,
            data.period_progress.unit,
            state.is_fallback,
            bool(state.stale_error),
        )

    start_scheduler(refresher, on_refresh=report)


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"salesboard v{__version__}"
    )

    parser.add_argument("--config", required=False, help="Path to config YAML")

    parser.add_argument("--once", action="store_true", help="Refresh once and print the snapshot (default)")
    parser.add_argument("--advice", action="store_true", help="Also generate AI advice")
    parser.add_argument("--watch", action="store_true", help="Keep refreshing on the configured interval")

    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"salesboard v{__version__}")
        return 0

    # ---- LOGGING ----
    get_logger("salesboard", level=logging.DEBUG if args.verbose else logging.INFO)

    if args.watch and args.advice:
        parser.error("--advice cannot be combined with --watch")

    # ---- WATCH ----
    if args.watch:
        _watch(args.config)
        return 0

    # ---- SINGLE REFRESH ----
    from salesboard.narrative.errors import AdviceError

    try:
        result = run_once(args.config, with_advice=args.advice)
    except AdviceError as e:
        print(f"AIアドバイスの取得に失敗: {e.user_message}", file=sys.stderr)
        return 2

    if result["is_fallback"]:
        print("⚠️ Live data unavailable; showing fallback data", file=sys.stderr)

    print(json.dumps(result["data"], ensure_ascii=False, indent=2))

    if result["advice"]:
        print()
        for item in result["advice"]:
            print(f"● {item}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
