"""HTTP client for NOAA SWPC space weather JSON feeds.

Each feed is fetched with a single GET. Failures of any kind surface as
FeedError so the monitor can skip that feed for the current cycle.
"""

import logging
from typing import Any, Callable, TypeVar

import requests

from .models import BzReading, CategoricalAlert, KpReading

logger = logging.getLogger(__name__)

ALERTS_URL = "https://services.swpc.noaa.gov/json/alerts.json"
KP_INDEX_URL = "https://services.swpc.noaa.gov/json/planetary_k_index_1m.json"
SOLAR_WIND_URL = "https://services.swpc.noaa.gov/products/summary/dscovr-solar-wind.json"

T = TypeVar("T")


class FeedError(Exception):
    """A feed could not be fetched or parsed."""

    def __init__(self, feed: str, message: str):
        super().__init__(f"{feed}: {message}")
        self.feed = feed


class SWPCClient:
    """Client for the public SWPC JSON services (no auth required)."""

    def __init__(self, session: requests.Session | None = None, timeout: float = 30):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get_json(self, url: str) -> Any:
        """GET a URL and decode the JSON body."""
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_alerts(self) -> list[CategoricalAlert]:
        """Get current SWPC alert, watch and warning products."""
        return self._fetch("alerts", ALERTS_URL, CategoricalAlert.from_json)

    def get_kp_index(self) -> list[KpReading]:
        """Get 1-minute planetary K-index samples, oldest first."""
        return self._fetch("kp_index", KP_INDEX_URL, KpReading.from_json)

    def get_solar_wind(self) -> list[BzReading]:
        """Get the DSCOVR solar wind magnetic field summary."""
        return self._fetch("solar_wind", SOLAR_WIND_URL, BzReading.from_json)

    def _fetch(self, feed: str, url: str, parse: Callable[[dict], T]) -> list[T]:
        try:
            payload = self.get_json(url)
        except ValueError as e:
            raise FeedError(feed, f"invalid JSON: {e}") from e
        except requests.RequestException as e:
            raise FeedError(feed, f"request failed: {e}") from e

        # Summary products may be served as a single object
        if isinstance(payload, dict):
            payload = [payload]
        if not isinstance(payload, list):
            raise FeedError(feed, f"expected a JSON list, got {type(payload).__name__}")

        try:
            records = [parse(record) for record in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise FeedError(feed, f"unexpected record shape: {e!r}") from e

        logger.debug(f"Fetched {len(records)} record(s) from {feed}")
        return records
