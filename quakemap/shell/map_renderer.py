"""Map Renderer - Imperative Shell.

This module builds the interactive Leaflet map with folium. Tiling,
clustering and heat rendering are left to folium and its plugins; the
visual properties come precomputed from the core module.
"""

import logging
from pathlib import Path
from typing import Any

import folium
from folium.plugins import HeatMap, MarkerCluster

from quakemap.core.config import (
    CIRCLES_LAYER,
    HEATMAP_LAYER,
    MARKERS_LAYER,
    PLATES_LAYER,
    Config,
)
from quakemap.core.style import get_legend_entries
from quakemap.core.transform import TransformResult


logger = logging.getLogger(__name__)


# CSS offsets for each legend corner
_LEGEND_CORNERS = {
    "topleft": "top: 80px; left: 10px;",
    "topright": "top: 80px; right: 10px;",
    "bottomleft": "bottom: 30px; left: 10px;",
    "bottomright": "bottom: 30px; right: 10px;",
}

_EMPTY_COLLECTION: dict[str, Any] = {"type": "FeatureCollection", "features": []}


def build_legend_html(position: str = "bottomright") -> str:
    """Build the static depth legend overlay.

    Args:
        position: Map corner ("topleft", "topright", "bottomleft", "bottomright")

    Returns:
        HTML snippet for the legend box
    """
    rows = "".join(
        f"<i style='background: {color}; width: 18px; height: 18px; "
        f"float: left; margin-right: 8px; opacity: 0.9;'></i>{label}<br/>"
        for color, label in get_legend_entries()
    )
    corner = _LEGEND_CORNERS.get(position, _LEGEND_CORNERS["bottomright"])
    return (
        f'<div class="info legend" style="position: fixed; {corner} '
        "z-index: 9999; background-color: white; padding: 6px 10px; "
        'line-height: 18px; border-radius: 5px; font-size: 14px;">'
        f"<h4 style='margin: 0 0 6px;'>Depth Legend</h4>{rows}</div>"
    )


def _boundary_data(boundaries: dict[str, Any]) -> dict[str, Any]:
    # folium can't style a document without a "type"
    if not boundaries or "type" not in boundaries:
        return _EMPTY_COLLECTION
    return boundaries


def build_map(result: TransformResult, config: Config) -> folium.Map:
    """Compose the interactive earthquake map.

    Args:
        result: Overlay collections from the core transform
        config: Application configuration

    Returns:
        folium.Map with base layers, overlays, layer control and legend
    """
    visible = set(config.view.visible_overlays)

    fmap = folium.Map(
        location=config.view.center,
        zoom_start=config.view.zoom,
        tiles=None,
    )

    # Base layers are mutually exclusive; the first is shown on load
    for index, layer in enumerate(config.base_layers):
        folium.TileLayer(
            tiles=layer.url,
            attr=layer.attribution,
            name=layer.name,
            overlay=False,
            control=True,
            show=index == 0,
        ).add_to(fmap)

    cluster = MarkerCluster(name=MARKERS_LAYER, show=MARKERS_LAYER in visible)
    for visual in result.markers:
        folium.Marker(
            location=list(visual.position),
            popup=folium.Popup(visual.popup_text),
        ).add_to(cluster)
    cluster.add_to(fmap)

    HeatMap(
        result.heat_points,
        name=HEATMAP_LAYER,
        radius=config.heat.radius,
        blur=config.heat.blur,
        show=HEATMAP_LAYER in visible,
    ).add_to(fmap)

    circles = folium.FeatureGroup(name=CIRCLES_LAYER, show=CIRCLES_LAYER in visible)
    for visual in result.circles:
        folium.Circle(
            location=list(visual.position),
            radius=visual.size,
            color=visual.color,
            fill=True,
            fill_color=visual.color,
            fill_opacity=config.circle_fill_opacity,
            popup=folium.Popup(visual.popup_text),
        ).add_to(circles)
    circles.add_to(fmap)

    style = dict(result.boundary_style)
    folium.GeoJson(
        _boundary_data(result.boundaries),
        name=PLATES_LAYER,
        style_function=lambda _feature: style,
        show=PLATES_LAYER in visible,
    ).add_to(fmap)

    folium.LayerControl().add_to(fmap)

    fmap.get_root().html.add_child(
        folium.Element(build_legend_html(config.legend_position))
    )

    logger.info(
        "Built map with %d earthquakes and %d base layers",
        result.count,
        len(config.base_layers),
    )

    return fmap


def render_html(fmap: folium.Map) -> str:
    """Render the map as a standalone HTML page."""
    return fmap.get_root().render()


def save_map(fmap: folium.Map, path: str | Path) -> Path:
    """Write the map page to disk.

    This function performs file I/O.

    Args:
        fmap: Map from build_map()
        path: Destination HTML file

    Returns:
        The path written
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    fmap.save(str(output))

    logger.info("Saved map to %s", output)

    return output
