"""GeoJSON Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS earthquake feed and
the tectonic plate boundary feed. All I/O is contained here; parsing and
transformation are in the core module.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import requests

from quakemap.core.config import EARTHQUAKE_FEED_URL, PLATES_FEED_URL


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30


class FeedError(Exception):
    """A feed could not be fetched or decoded.

    Attributes:
        feed: Which feed failed ("earthquakes" or "plates")
        url: The URL that was requested
    """

    def __init__(self, feed: str, url: str, message: str) -> None:
        super().__init__(f"{feed} feed failed ({url}): {message}")
        self.feed = feed
        self.url = url


@dataclass
class FeedData:
    """Both feed documents, fetched together.

    Attributes:
        earthquakes: USGS FeatureCollection
        plates: Plate-boundary FeatureCollection
    """
    earthquakes: dict[str, Any]
    plates: dict[str, Any]


class FeedClient:
    """Client for fetching the earthquake and plate-boundary feeds.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        earthquake_url: str = EARTHQUAKE_FEED_URL,
        plates_url: str = PLATES_FEED_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize feed client.

        Args:
            earthquake_url: USGS GeoJSON summary feed URL
            plates_url: Tectonic plate boundary GeoJSON URL
            timeout: Request timeout in seconds
        """
        self.earthquake_url = earthquake_url
        self.plates_url = plates_url
        self.timeout = timeout

    def _get_json(self, feed: str, url: str) -> dict[str, Any]:
        """GET a URL and decode the JSON body.

        Raises:
            FeedError: If the request fails or the body isn't a JSON object
        """
        logger.info("Fetching %s feed", feed, extra={"url": url})

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as e:
            raise FeedError(feed, url, "request timed out") from e
        except requests.RequestException as e:
            raise FeedError(feed, url, str(e)) from e

        # Decoded apart from the request: JSONDecodeError is also a RequestException
        try:
            data = response.json()
        except ValueError as e:
            raise FeedError(feed, url, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise FeedError(feed, url, "expected a GeoJSON object")

        return data

    def fetch_earthquakes(self) -> dict[str, Any]:
        """Fetch the earthquake FeatureCollection.

        This method performs HTTP I/O.

        Returns:
            Raw GeoJSON response from USGS

        Raises:
            FeedError: If the request fails
        """
        data = self._get_json("earthquakes", self.earthquake_url)
        metadata = data.get("metadata") or {}
        count = metadata.get("count", len(data.get("features") or []))

        logger.info("Fetched %d earthquakes from USGS", count)

        return data

    def fetch_plates(self) -> dict[str, Any]:
        """Fetch the tectonic plate boundary FeatureCollection.

        This method performs HTTP I/O.

        Returns:
            Raw GeoJSON boundary document

        Raises:
            FeedError: If the request fails
        """
        data = self._get_json("plates", self.plates_url)

        logger.info(
            "Fetched %d plate boundary features",
            len(data.get("features") or []),
        )

        return data

    def fetch_all(self) -> FeedData:
        """Fetch both feeds concurrently and wait for both.

        Neither payload depends on the other, so the requests run in
        parallel and are joined before returning.

        Returns:
            FeedData with both documents

        Raises:
            FeedError: If either request fails
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            earthquakes_future = executor.submit(self.fetch_earthquakes)
            plates_future = executor.submit(self.fetch_plates)

            return FeedData(
                earthquakes=earthquakes_future.result(),
                plates=plates_future.result(),
            )
