"""Earthquake data models and parsing - Pure functions.

This module handles parsing USGS GeoJSON features into typed Earthquake
objects. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake data model.

    Attributes:
        title: Feed-provided title, e.g. "M 4.5 - 10km NE of Ridgecrest, CA"
        magnitude: Earthquake magnitude (0.0 when the feed has no value)
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        depth_km: Depth in kilometers
    """
    title: str
    magnitude: float
    latitude: float
    longitude: float
    depth_km: float

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


def extract_features(geojson: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the feature list of a GeoJSON FeatureCollection.

    Pure function.

    Args:
        geojson: FeatureCollection document

    Returns:
        List of feature dicts (empty if the document has none)
    """
    return list(geojson.get("features") or [])


def _to_magnitude(value: Any) -> float:
    """Coerce a feed magnitude to float; null or garbage counts as 0.0."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def parse_earthquake(feature: dict[str, Any]) -> Earthquake | None:
    """Parse a single GeoJSON feature into an Earthquake.

    Pure function: features without a geometry are expected in the feed
    and are skipped by returning None.

    Args:
        feature: GeoJSON feature dict from the USGS feed

    Returns:
        Earthquake object or None if the feature can't be placed on a map
    """
    if not isinstance(feature, dict):
        return None

    geometry = feature.get("geometry")
    if not geometry:
        return None

    try:
        coords = geometry.get("coordinates") or []
        if len(coords) < 2:
            return None

        props = feature.get("properties") or {}

        depth = coords[2] if len(coords) > 2 and coords[2] is not None else 0.0

        return Earthquake(
            title=props.get("title") or "",
            # USGS reports null magnitudes for some events
            magnitude=_to_magnitude(props.get("mag")),
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth_km=float(depth),
        )
    except (AttributeError, TypeError, ValueError):
        return None


def parse_earthquakes(features: list[dict[str, Any]]) -> list[Earthquake]:
    """Parse GeoJSON features into a list of Earthquakes.

    Pure function: drops features that can't be parsed, keeps input order.

    Args:
        features: Feature dicts, typically from extract_features()

    Returns:
        List of valid Earthquake objects in input order
    """
    earthquakes = []

    for feature in features:
        earthquake = parse_earthquake(feature)
        if earthquake is not None:
            earthquakes.append(earthquake)

    return earthquakes
