"""Feature transform - Pure functions.

Turns parsed earthquakes and the plate-boundary document into the
collections the map renderer draws: cluster markers, heat points,
and depth-colored circles.
"""

import html
from dataclasses import dataclass, field
from typing import Any

from quakemap.core.earthquake import Earthquake, parse_earthquakes
from quakemap.core.style import get_depth_color, get_marker_size


BOUNDARY_COLOR = "firebrick"
BOUNDARY_WEIGHT = 5


@dataclass(frozen=True)
class DerivedVisual:
    """Visual properties computed for one earthquake.

    Attributes:
        position: (latitude, longitude)
        size: Circle radius in metres
        color: Hex color for stroke and fill
        popup_text: HTML shown when the marker or circle is clicked
    """
    position: tuple[float, float]
    size: float
    color: str
    popup_text: str


@dataclass
class TransformResult:
    """Everything the renderer needs, in input order.

    Attributes:
        markers: One entry per earthquake for the cluster layer
        heat_points: One [lat, lon] per earthquake for the heat layer
        circles: One entry per earthquake for the circle layer
        boundaries: Plate-boundary GeoJSON, passed through untouched
        boundary_style: Fixed Leaflet path style for the boundaries
    """
    markers: list[DerivedVisual] = field(default_factory=list)
    heat_points: list[list[float]] = field(default_factory=list)
    circles: list[DerivedVisual] = field(default_factory=list)
    boundaries: dict[str, Any] = field(default_factory=dict)
    boundary_style: dict[str, Any] = field(default_factory=lambda: {
        "color": BOUNDARY_COLOR,
        "weight": BOUNDARY_WEIGHT,
    })

    @property
    def count(self) -> int:
        """Number of earthquakes placed on the map."""
        return len(self.circles)


def format_popup(title: str) -> str:
    """Format popup HTML for an earthquake.

    Pure function. The title is escaped since it comes from the feed.
    """
    return f"<h1>{html.escape(title)}</h1>"


def derive_visual(earthquake: Earthquake) -> DerivedVisual:
    """Compute position, size, color and popup for one earthquake.

    Pure function.

    Args:
        earthquake: Parsed earthquake

    Returns:
        DerivedVisual for the earthquake
    """
    return DerivedVisual(
        position=earthquake.coordinates,
        size=get_marker_size(earthquake.magnitude),
        color=get_depth_color(earthquake.depth_km),
        popup_text=format_popup(earthquake.title),
    )


def transform_features(
    features: list[dict[str, Any]],
    boundaries: dict[str, Any],
) -> TransformResult:
    """Build the map overlay collections from raw features.

    Pure function. Features without geometry are skipped, so K placeable
    features give exactly K markers, K heat points and K circles.

    Args:
        features: GeoJSON features from the earthquake feed
        boundaries: Plate-boundary GeoJSON document

    Returns:
        TransformResult with parallel collections
    """
    result = TransformResult(boundaries=boundaries)

    for earthquake in parse_earthquakes(features):
        visual = derive_visual(earthquake)
        result.markers.append(visual)
        result.heat_points.append(list(visual.position))
        result.circles.append(visual)

    return result
