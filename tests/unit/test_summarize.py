"""Tests for the summary builder."""

from __future__ import annotations

from kml_viewer.activities.summarize import summarize
from kml_viewer.models.feature import Feature, FeatureCollection
from kml_viewer.models.geometry import RECOGNISED_KINDS, LineString, OtherGeometry, Point


class TestSummarize:
    """Count per geometry kind, always zero-filled."""

    def test_counts_each_kind(self, sample_collection: FeatureCollection) -> None:
        assert summarize(sample_collection) == {
            "Point": 1,
            "LineString": 1,
            "Polygon": 1,
            "MultiLineString": 1,
        }

    def test_key_order(self, sample_collection: FeatureCollection) -> None:
        assert list(summarize(sample_collection)) == [k.value for k in RECOGNISED_KINDS]

    def test_empty_collection_all_zero(self) -> None:
        assert summarize(FeatureCollection()) == {
            "Point": 0,
            "LineString": 0,
            "Polygon": 0,
            "MultiLineString": 0,
        }

    def test_null_and_unknown_geometry_excluded(self) -> None:
        collection = FeatureCollection(
            features=(
                Feature(None, {"name": "Note"}),
                Feature(OtherGeometry(type_name="GeometryCollection"), {}),
            )
        )
        assert sum(summarize(collection).values()) == 0

    def test_sum_matches_recognised_features(self, sample_collection: FeatureCollection) -> None:
        recognised = sum(1 for f in sample_collection if f.kind in RECOGNISED_KINDS)
        assert sum(summarize(sample_collection).values()) == recognised == 4

    def test_counts_degenerate_geometry(self) -> None:
        """Counting does not look at coordinates; a one-point line still counts."""
        collection = FeatureCollection(
            features=(
                Feature(LineString(coordinates=((2, 1),)), {}),
                Feature(Point(coordinates=("a", "b")), {}),
            )
        )
        summary = summarize(collection)
        assert summary["LineString"] == 1
        assert summary["Point"] == 1

    def test_accepts_plain_iterable(self) -> None:
        features = [Feature(Point(coordinates=(0, 0)), {}) for _ in range(3)]
        assert summarize(features)["Point"] == 3

    def test_idempotent(self, sample_collection: FeatureCollection) -> None:
        assert summarize(sample_collection) == summarize(sample_collection)
