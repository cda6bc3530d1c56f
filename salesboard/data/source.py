import json
import logging
from typing import Optional

import requests

from salesboard.config.dashboard_config import DataSourceConfig
from salesboard.core.models import DashboardData, DataValidationError
from salesboard.data.fallback import load_fallback

logger = logging.getLogger(__name__)


class DataFetchError(RuntimeError):
    pass


class DashboardDataSource:
    """
    Live dashboard data from the spreadsheet-backed JSON endpoint.

    ``fetch`` raises DataFetchError on any failure.
    ``refresh`` never raises: failures are logged and the embedded
    fallback snapshot is returned instead.
    """

    def __init__(
        self,
        config: Optional[DataSourceConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or DataSourceConfig()
        self.session = session or requests.Session()

    # -------------------------------------------------
    # PUBLIC
    # -------------------------------------------------

    def fetch(self) -> DashboardData:
        url = self.config.url

        try:
            response = self.session.get(
                url,
                allow_redirects=True,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise DataFetchError(f"Request to data endpoint failed: {e}") from e

        if not response.ok:
            raise DataFetchError(
                f"Server responded with an error: {response.status_code} "
                f"{response.reason} - {response.text[:200]}"
            )

        try:
            payload = json.loads(response.text)
        except (ValueError, RecursionError) as e:
            raise DataFetchError(f"Response body is not valid JSON: {e}") from e

        try:
            data = DashboardData.from_dict(payload)
        except DataValidationError as e:
            raise DataFetchError(f"Fetched data is not in the expected format: {e}") from e

        logger.info(
            "Fetched dashboard data: %s metrics, %s monthly / %s daily ranking rows",
            len(data.individual_metrics),
            len(data.monthly_sales_ranking),
            len(data.daily_sales_ranking),
        )
        return data

    def refresh(self) -> DashboardData:
        try:
            return self.fetch()
        except DataFetchError as e:
            logger.warning(
                "Failed to fetch or parse live data. Falling back to embedded data: %s", e
            )
            return self.load_fallback()

    def load_fallback(self) -> DashboardData:
        return load_fallback()

    def close(self) -> None:
        self.session.close()
