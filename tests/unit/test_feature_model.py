"""Tests for the Feature / FeatureCollection models and GeoJSON conversion."""

from __future__ import annotations

import pytest

from kml_viewer.models.feature import Feature, FeatureCollection
from kml_viewer.models.geometry import GeometryKind, LineString, MultiLineString

GEOJSON = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": [[0, 0], [0, 1]]},
            "properties": {"name": "Ridge Walk"},
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "MultiLineString",
                "coordinates": [[[0, 0], [0, 1]], [[0, 1], [0, 2]]],
            },
            "properties": {},
        },
        {"type": "Feature", "geometry": None, "properties": {"name": "Note"}},
    ],
}


class TestFeature:
    """Single feature behaviour."""

    def test_name_property(self) -> None:
        assert Feature(None, {"name": "Trail"}).name == "Trail"

    def test_missing_name_is_empty(self) -> None:
        assert Feature(None, {}).name == ""

    def test_non_string_name_stringified(self) -> None:
        assert Feature(None, {"name": 42}).name == "42"

    def test_kind(self) -> None:
        assert Feature(LineString(coordinates=()), {}).kind is GeometryKind.LINE_STRING
        assert Feature(None, {}).kind is GeometryKind.UNKNOWN

    def test_from_dict_missing_properties(self) -> None:
        feature = Feature.from_dict({"type": "Feature", "geometry": None})
        assert feature.properties == {}

    def test_from_dict_rejects_bad_properties(self) -> None:
        with pytest.raises(TypeError, match="properties must be a dict"):
            Feature.from_dict({"geometry": None, "properties": ["name"]})

    def test_frozen(self) -> None:
        feature = Feature(None, {})
        with pytest.raises(AttributeError):
            feature.geometry = None  # type: ignore[misc]


class TestFeatureCollection:
    """Collection conversion and iteration."""

    def test_from_dict(self) -> None:
        collection = FeatureCollection.from_dict(GEOJSON, source_file="walks.kml")
        assert len(collection) == 3
        assert collection.source_file == "walks.kml"
        assert isinstance(collection.features[0].geometry, LineString)
        assert isinstance(collection.features[1].geometry, MultiLineString)
        assert collection.features[2].geometry is None

    def test_order_preserved(self) -> None:
        collection = FeatureCollection.from_dict(GEOJSON)
        assert [f.name for f in collection] == ["Ridge Walk", "", "Note"]

    def test_roundtrip(self) -> None:
        collection = FeatureCollection.from_dict(GEOJSON)
        assert collection.to_dict() == GEOJSON

    def test_rejects_non_list_features(self) -> None:
        with pytest.raises(TypeError, match="features must be a list"):
            FeatureCollection.from_dict({"features": {"a": 1}})

    def test_rejects_non_dict_feature(self) -> None:
        with pytest.raises(TypeError, match=r"features\[1\]"):
            FeatureCollection.from_dict({"features": [{"geometry": None}, "oops"]})

    def test_missing_features_is_empty(self) -> None:
        assert len(FeatureCollection.from_dict({"type": "FeatureCollection"})) == 0
