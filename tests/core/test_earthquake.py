"""Unit tests for earthquake parsing.

These tests exercise pure functions:
- No mocks needed
- Fast, deterministic execution
- Simple assertions on pure functions
"""

import pytest

from quakemap.core.earthquake import (
    Earthquake,
    extract_features,
    parse_earthquake,
    parse_earthquakes,
)


# Sample USGS GeoJSON feature for testing
SAMPLE_FEATURE = {
    "type": "Feature",
    "id": "nc75095866",
    "properties": {
        "mag": 4.2,
        "place": "10km NE of San Francisco, CA",
        "time": 1703001600000,
        "title": "M 4.2 - 10km NE of San Francisco, CA",
    },
    "geometry": {
        "type": "Point",
        "coordinates": [-122.4194, 37.7749, 10.5],  # lon, lat, depth
    },
}

NO_GEOMETRY_FEATURE = {
    "type": "Feature",
    "id": "ak000",
    "properties": {"mag": 1.1, "title": "M 1.1 - Alaska"},
    "geometry": None,
}


class TestParseEarthquake:
    """Tests for parse_earthquake() pure function."""

    def test_parses_valid_feature(self):
        """Should parse a valid GeoJSON feature into Earthquake."""
        result = parse_earthquake(SAMPLE_FEATURE)

        assert result is not None
        assert result.title == "M 4.2 - 10km NE of San Francisco, CA"
        assert result.magnitude == 4.2
        assert result.latitude == 37.7749
        assert result.longitude == -122.4194
        assert result.depth_km == 10.5

    def test_coordinates_are_lat_lon(self):
        """GeoJSON lon/lat order is swapped to (lat, lon)."""
        result = parse_earthquake(SAMPLE_FEATURE)
        assert result.coordinates == (37.7749, -122.4194)

    def test_null_geometry_returns_none(self):
        """Features with null geometry are skipped."""
        assert parse_earthquake(NO_GEOMETRY_FEATURE) is None

    def test_missing_geometry_returns_none(self):
        """Features without a geometry key are skipped."""
        feature = {"properties": {"mag": 3.0, "title": "x"}}
        assert parse_earthquake(feature) is None

    def test_too_few_coordinates_returns_none(self):
        """A geometry without lat/lon can't be placed."""
        feature = {**SAMPLE_FEATURE, "geometry": {"coordinates": [1.0]}}
        assert parse_earthquake(feature) is None

    def test_null_magnitude_becomes_zero(self):
        """USGS null magnitudes are treated as zero."""
        feature = {**SAMPLE_FEATURE, "properties": {"mag": None, "title": "M ?"}}
        result = parse_earthquake(feature)
        assert result is not None
        assert result.magnitude == 0.0

    def test_non_numeric_magnitude_becomes_zero(self):
        """A garbage magnitude keeps the feature with magnitude zero."""
        feature = {**SAMPLE_FEATURE, "properties": {"mag": "n/a", "title": "M ?"}}
        result = parse_earthquake(feature)
        assert result is not None
        assert result.magnitude == 0.0

    @pytest.mark.parametrize("feature", [None, "quake", 42, ["geometry"]])
    def test_non_dict_feature_returns_none(self, feature):
        """Entries that aren't objects are skipped."""
        assert parse_earthquake(feature) is None

    def test_missing_depth_becomes_zero(self):
        """Two-element coordinates get a zero depth."""
        feature = {**SAMPLE_FEATURE, "geometry": {"coordinates": [10.0, 20.0]}}
        result = parse_earthquake(feature)
        assert result.depth_km == 0.0

    def test_missing_title_is_empty(self):
        """Missing title gives an empty string."""
        feature = {**SAMPLE_FEATURE, "properties": {"mag": 2.0}}
        assert parse_earthquake(feature).title == ""

    def test_non_numeric_coordinates_return_none(self):
        """Garbage coordinates are dropped, not raised."""
        feature = {**SAMPLE_FEATURE, "geometry": {"coordinates": ["a", "b", "c"]}}
        assert parse_earthquake(feature) is None

    def test_earthquake_is_immutable(self):
        """Earthquake is frozen."""
        result = parse_earthquake(SAMPLE_FEATURE)
        with pytest.raises(AttributeError):
            result.magnitude = 9.0


class TestParseEarthquakes:
    """Tests for parse_earthquakes() pure function."""

    def test_skips_features_without_geometry(self):
        """Only placeable features are returned."""
        result = parse_earthquakes([SAMPLE_FEATURE, NO_GEOMETRY_FEATURE, SAMPLE_FEATURE])
        assert len(result) == 2
        assert all(isinstance(e, Earthquake) for e in result)

    def test_keeps_input_order(self):
        """Output order follows input order."""
        second = {
            **SAMPLE_FEATURE,
            "properties": {"mag": 1.0, "title": "second"},
            "geometry": {"coordinates": [0.0, 0.0, 1.0]},
        }
        result = parse_earthquakes([SAMPLE_FEATURE, second])
        assert [e.title for e in result] == [SAMPLE_FEATURE["properties"]["title"], "second"]

    def test_empty_list(self):
        """Empty input gives empty output."""
        assert parse_earthquakes([]) == []


class TestExtractFeatures:
    """Tests for extract_features()."""

    def test_returns_feature_list(self):
        """Features are taken from the collection."""
        geojson = {"type": "FeatureCollection", "features": [SAMPLE_FEATURE]}
        assert extract_features(geojson) == [SAMPLE_FEATURE]

    def test_missing_features_is_empty(self):
        """A document without features gives an empty list."""
        assert extract_features({"type": "FeatureCollection"}) == []
        assert extract_features({"features": None}) == []
