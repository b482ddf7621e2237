"""Tests for the geometry variants, the classifier and GeoJSON conversion."""

from __future__ import annotations

import pytest

from kml_viewer.models.geometry import (
    LINE_KINDS,
    RECOGNISED_KINDS,
    GeometryKind,
    LineString,
    MultiLineString,
    OtherGeometry,
    Point,
    Polygon,
    classify,
    geometry_from_dict,
)


class TestClassify:
    """Classifier is total over every variant and ``None``."""

    @pytest.mark.parametrize(
        ("geometry", "expected"),
        [
            (Point(coordinates=(1.0, 2.0)), GeometryKind.POINT),
            (LineString(coordinates=((0, 0), (1, 1))), GeometryKind.LINE_STRING),
            (MultiLineString(coordinates=(((0, 0), (1, 1)),)), GeometryKind.MULTI_LINE_STRING),
            (Polygon(coordinates=(((0, 0), (1, 0), (1, 1), (0, 0)),)), GeometryKind.POLYGON),
            (OtherGeometry(type_name="MultiPoint"), GeometryKind.UNKNOWN),
            (None, GeometryKind.UNKNOWN),
        ],
    )
    def test_classify(self, geometry: object, expected: GeometryKind) -> None:
        assert classify(geometry) is expected  # type: ignore[arg-type]

    def test_kind_property_matches_classify(self) -> None:
        line = LineString(coordinates=())
        assert line.kind is classify(line)

    def test_recognised_kinds_order(self) -> None:
        assert [k.value for k in RECOGNISED_KINDS] == [
            "Point",
            "LineString",
            "Polygon",
            "MultiLineString",
        ]

    def test_unknown_not_recognised(self) -> None:
        assert GeometryKind.UNKNOWN not in RECOGNISED_KINDS
        assert LINE_KINDS == {GeometryKind.LINE_STRING, GeometryKind.MULTI_LINE_STRING}


class TestGeometryFromDict:
    """GeoJSON ``type`` tags are resolved to variants exactly once."""

    def test_point(self) -> None:
        geometry = geometry_from_dict({"type": "Point", "coordinates": [20, 10]})
        assert isinstance(geometry, Point)
        assert geometry.coordinates == (20, 10)

    def test_nested_coordinates_frozen(self) -> None:
        geometry = geometry_from_dict(
            {"type": "MultiLineString", "coordinates": [[[0, 0], [0, 1]], [[0, 1], [0, 2]]]}
        )
        assert isinstance(geometry, MultiLineString)
        assert geometry.coordinates == (((0, 0), (0, 1)), ((0, 1), (0, 2)))

    def test_malformed_coordinates_kept_as_is(self) -> None:
        geometry = geometry_from_dict({"type": "LineString", "coordinates": [[0, 0], ["a", None]]})
        assert isinstance(geometry, LineString)
        assert geometry.coordinates == ((0, 0), ("a", None))

    @pytest.mark.parametrize("data", [None, "Point", {}, {"type": ""}, {"type": 7}])
    def test_no_geometry(self, data: object) -> None:
        assert geometry_from_dict(data) is None

    def test_unrecognised_type(self) -> None:
        geometry = geometry_from_dict({"type": "MultiPoint", "coordinates": [[1, 1], [2, 2]]})
        assert isinstance(geometry, OtherGeometry)
        assert geometry.type_name == "MultiPoint"
        assert classify(geometry) is GeometryKind.UNKNOWN

    def test_geometry_collection_members(self) -> None:
        geometry = geometry_from_dict(
            {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "Point", "coordinates": [1, 2]},
                    {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
                ],
            }
        )
        assert isinstance(geometry, OtherGeometry)
        assert [type(g) for g in geometry.geometries] == [Point, LineString]

    def test_to_dict_roundtrip(self) -> None:
        data = {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]}
        geometry = geometry_from_dict(data)
        assert geometry is not None
        assert geometry.to_dict() == data

    def test_geometry_collection_to_dict(self) -> None:
        data = {
            "type": "GeometryCollection",
            "geometries": [{"type": "Point", "coordinates": [1, 2]}],
        }
        geometry = geometry_from_dict(data)
        assert geometry is not None
        assert geometry.to_dict() == data

    def test_variants_are_immutable(self) -> None:
        point = Point(coordinates=(1.0, 2.0))
        with pytest.raises(AttributeError):
            point.coordinates = (3.0, 4.0)  # type: ignore[misc]
