"""Tests for the folium map renderer.

These build real folium maps; no network access is needed since tiles
are only referenced by URL in the generated page.
"""

import folium
from folium.plugins import HeatMap, MarkerCluster

from quakemap.core.config import Config, ViewConfig
from quakemap.core.transform import transform_features
from quakemap.shell.map_renderer import (
    build_legend_html,
    build_map,
    render_html,
    save_map,
)


FEATURES = [
    {
        "geometry": {"coordinates": [-122.4, 37.8, 5]},
        "properties": {"mag": 4.5, "title": "M 4.5 - Bay Area"},
    },
    {
        "geometry": {"coordinates": [142.1, 38.3, 95]},
        "properties": {"mag": 5.1, "title": "M 5.1 - off Honshu"},
    },
    {"geometry": None, "properties": {"mag": 1.0, "title": "dropped"}},
]

PLATES = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "properties": {"Name": "AF-AN"},
            "geometry": {"type": "LineString", "coordinates": [[-0.4, -54.8], [0.0, -54.5]]},
        }
    ],
}


def _children(fmap, kind):
    return [c for c in fmap._children.values() if isinstance(c, kind)]


def _overlay(fmap, name):
    for child in fmap._children.values():
        if getattr(child, "layer_name", None) == name:
            return child
    raise AssertionError(f"no layer named {name}")


class TestBuildLegendHtml:
    """Tests for build_legend_html()."""

    def test_lists_all_buckets(self):
        html = build_legend_html()
        assert "Depth Legend" in html
        for label in ("-10 to 10", "10 to 30", "30 to 50", "50 to 70", "70 to 90", "90+"):
            assert label in html
        assert html.index("#98EE00") < html.index("#EA2C2C")

    def test_position_corner(self):
        """Legend sits in the requested corner."""
        assert "bottom: 30px; right: 10px;" in build_legend_html("bottomright")
        assert "top: 80px; left: 10px;" in build_legend_html("topleft")


class TestBuildMap:
    """Tests for build_map()."""

    def setup_method(self):
        self.result = transform_features(FEATURES, PLATES)
        self.config = Config()

    def test_returns_folium_map(self):
        fmap = build_map(self.result, self.config)
        assert isinstance(fmap, folium.Map)

    def test_two_base_layers_first_shown(self):
        """Base layers are exclusive and the street layer is the default."""
        fmap = build_map(self.result, self.config)
        tiles = _children(fmap, folium.TileLayer)

        assert [t.layer_name for t in tiles] == ["Street View", "Topography"]
        assert [t.overlay for t in tiles] == [False, False]
        assert [t.show for t in tiles] == [True, False]

    def test_marker_cluster_has_one_marker_per_earthquake(self):
        fmap = build_map(self.result, self.config)
        cluster = _overlay(fmap, "Earthquake Markers")

        assert isinstance(cluster, MarkerCluster)
        markers = [c for c in cluster._children.values() if isinstance(c, folium.Marker)]
        assert len(markers) == 2
        assert markers[0].location == [37.8, -122.4]

    def test_heatmap_points(self):
        fmap = build_map(self.result, self.config)
        heat = _overlay(fmap, "Heatmap")

        assert isinstance(heat, HeatMap)
        assert heat.data == [[37.8, -122.4], [38.3, 142.1]]
        assert heat.options["radius"] == 25
        assert heat.options["blur"] == 20

    def test_circles_use_depth_color_and_size(self):
        fmap = build_map(self.result, self.config)
        group = _overlay(fmap, "Circles")
        circles = [c for c in group._children.values() if isinstance(c, folium.Circle)]

        assert len(circles) == 2
        assert circles[0].options["radius"] == self.result.circles[0].size
        assert circles[0].options["color"] == "#98EE00"
        assert circles[0].options["fillColor"] == "#98EE00"
        assert circles[0].options["fillOpacity"] == 0.75
        assert circles[1].options["color"] == "#EA2C2C"

    def test_default_visible_overlays(self):
        """Markers and plates start on; heatmap and circles start off."""
        fmap = build_map(self.result, self.config)

        assert _overlay(fmap, "Earthquake Markers").show is True
        assert _overlay(fmap, "Tectonic Plates").show is True
        assert _overlay(fmap, "Heatmap").show is False
        assert _overlay(fmap, "Circles").show is False

    def test_visible_overlays_follow_config(self):
        config = Config(view=ViewConfig(visible_overlays=["Heatmap"]))
        fmap = build_map(self.result, config)

        assert _overlay(fmap, "Heatmap").show is True
        assert _overlay(fmap, "Earthquake Markers").show is False

    def test_plate_boundaries_styled(self):
        fmap = build_map(self.result, self.config)
        plates = _overlay(fmap, "Tectonic Plates")

        assert isinstance(plates, folium.GeoJson)
        assert plates.style_function(PLATES["features"][0]) == {
            "color": "firebrick",
            "weight": 5,
        }

    def test_has_layer_control(self):
        fmap = build_map(self.result, self.config)
        assert len(_children(fmap, folium.LayerControl)) == 1

    def test_empty_input_builds(self):
        """No earthquakes and no boundaries still builds a map."""
        result = transform_features([], {})
        fmap = build_map(result, self.config)
        html = render_html(fmap)

        assert "Depth Legend" in html


class TestRenderHtml:
    """Tests for render_html()."""

    def test_page_contents(self):
        result = transform_features(FEATURES, PLATES)
        html = render_html(build_map(result, Config()))

        assert "tile.openstreetmap.org" in html
        assert "tile.opentopomap.org" in html
        for name in ("Earthquake Markers", "Heatmap", "Circles", "Tectonic Plates"):
            assert name in html
        assert "firebrick" in html
        assert "M 4.5 - Bay Area" in html
        assert "Depth Legend" in html
        assert "dropped" not in html


class TestSaveMap:
    """Tests for save_map()."""

    def test_writes_file(self, tmp_path):
        result = transform_features(FEATURES, PLATES)
        fmap = build_map(result, Config())

        path = save_map(fmap, tmp_path / "out" / "map.html")

        assert path.exists()
        assert "Depth Legend" in path.read_text()
