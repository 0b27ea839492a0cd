"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components: fetch both feeds,
transform the features, hand the result to the map renderer.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import folium

from quakemap.core.config import Config
from quakemap.core.earthquake import extract_features
from quakemap.core.transform import TransformResult, transform_features
from quakemap.shell.feed_client import FeedClient
from quakemap.shell import map_renderer


logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of one fetch-transform-render cycle.

    Attributes:
        features_fetched: Features in the earthquake feed
        earthquakes_mapped: Features placed on the map
        map: The composed folium map
    """
    features_fetched: int
    earthquakes_mapped: int
    map: folium.Map

    @property
    def features_skipped(self) -> int:
        """Features dropped for lacking a usable geometry."""
        return self.features_fetched - self.earthquakes_mapped

    @property
    def summary(self) -> str:
        """Human-readable summary of the render."""
        return (
            f"Fetched {self.features_fetched} features, "
            f"{self.earthquakes_mapped} mapped, "
            f"{self.features_skipped} skipped"
        )


class Orchestrator:
    """Coordinates earthquake map generation.

    This class wires together:
    - Feed client (fetches earthquake and plate boundary GeoJSON)
    - Core functions (parsing, visual encoding, transform)
    - Map renderer (folium)

    FeedError from the client is not caught here; callers decide how
    to report a failed fetch.
    """

    def __init__(
        self,
        config: Config,
        feed_client: FeedClient | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            feed_client: Feed client (created if not provided)
        """
        self.config = config
        self.feed_client = feed_client or FeedClient(
            earthquake_url=config.feeds.earthquake_url,
            plates_url=config.feeds.plates_url,
            timeout=config.feeds.timeout_seconds,
        )

    def _transform(self) -> tuple[int, TransformResult]:
        """Fetch both feeds and run the core transform.

        Returns:
            Tuple of (features fetched, transform result)
        """
        feeds = self.feed_client.fetch_all()

        # Pure core functions
        features = extract_features(feeds.earthquakes)
        result = transform_features(features, feeds.plates)

        skipped = len(features) - result.count
        if skipped:
            logger.debug("Skipped %d features without geometry", skipped)

        return len(features), result

    def process(self) -> RenderResult:
        """Run a complete fetch-transform-render cycle.

        Returns:
            RenderResult holding the composed map

        Raises:
            FeedError: If either feed can't be fetched
        """
        fetched, result = self._transform()
        fmap = map_renderer.build_map(result, self.config)

        render = RenderResult(
            features_fetched=fetched,
            earthquakes_mapped=result.count,
            map=fmap,
        )
        logger.info("Completed: %s", render.summary)

        return render

    def render_page(self) -> str:
        """Run a cycle and return the page as an HTML string."""
        return map_renderer.render_html(self.process().map)

    def write_page(self, path: str | Path | None = None) -> Path:
        """Run a cycle and write the page to disk.

        Args:
            path: Destination file (defaults to config.output_path)

        Returns:
            The path written
        """
        render = self.process()
        return map_renderer.save_map(render.map, path or self.config.output_path)
