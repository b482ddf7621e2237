"""Geometry variants and the geometry classifier.

A geometry is one of a closed set of frozen dataclass variants:

- ``Point``: a single ``(lon, lat)`` coordinate pair
- ``LineString``: an ordered sequence of coordinate pairs
- ``MultiLineString``: an ordered sequence of line-strings
- ``Polygon``: a sequence of rings (counted, not measured)
- ``OtherGeometry``: any other GeoJSON type (``MultiPoint``,
  ``GeometryCollection``, ...), classified as ``Unknown``

Coordinates are stored as received (deep-converted to tuples), not
coerced to floats.  Whether a coordinate pair is usable is decided by
the consumers, so malformed input stays visible to the skip checks.

GeoJSON ``type`` strings are read exactly once, in
``geometry_from_dict``.  Everything downstream dispatches on the
variant class through ``classify``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar


class GeometryKind(enum.Enum):
    """Geometry bucket used by every analytical view."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_LINE_STRING = "MultiLineString"
    UNKNOWN = "Unknown"


#: Recognised kinds, in summary display order.
RECOGNISED_KINDS: tuple[GeometryKind, ...] = (
    GeometryKind.POINT,
    GeometryKind.LINE_STRING,
    GeometryKind.POLYGON,
    GeometryKind.MULTI_LINE_STRING,
)

#: Kinds that carry a measurable path.
LINE_KINDS: frozenset[GeometryKind] = frozenset(
    {GeometryKind.LINE_STRING, GeometryKind.MULTI_LINE_STRING}
)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Geometry:
    """Base class of the geometry variants.

    Attributes:
        coordinates: Nested tuples in GeoJSON axis order ``(lon, lat[, alt])``.
    """

    geojson_type: ClassVar[str] = ""

    coordinates: Any = ()

    @property
    def kind(self) -> GeometryKind:
        return classify(self)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON geometry object."""
        return {"type": self.geojson_type, "coordinates": _thaw(self.coordinates)}


@dataclass(frozen=True, slots=True)
class Point(Geometry):
    geojson_type = "Point"


@dataclass(frozen=True, slots=True)
class LineString(Geometry):
    geojson_type = "LineString"


@dataclass(frozen=True, slots=True)
class MultiLineString(Geometry):
    geojson_type = "MultiLineString"


@dataclass(frozen=True, slots=True)
class Polygon(Geometry):
    geojson_type = "Polygon"


@dataclass(frozen=True, slots=True)
class OtherGeometry(Geometry):
    """A geometry type outside the analysed set.

    Kept so that conversion is lossless for rendering clients.

    Attributes:
        type_name: The GeoJSON ``type`` string (e.g. ``"MultiPoint"``).
        geometries: Members of a ``GeometryCollection``.
    """

    type_name: str = ""
    geometries: tuple[Geometry, ...] = ()

    def to_dict(self) -> dict[str, object]:
        if self.type_name == "GeometryCollection":
            return {
                "type": self.type_name,
                "geometries": [g.to_dict() for g in self.geometries],
            }
        return {"type": self.type_name, "coordinates": _thaw(self.coordinates)}


_VARIANTS: dict[str, type[Geometry]] = {
    "Point": Point,
    "LineString": LineString,
    "MultiLineString": MultiLineString,
    "Polygon": Polygon,
}


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


def classify(geometry: Geometry | None) -> GeometryKind:
    """Bucket a geometry into its ``GeometryKind``.

    Total over its input: ``None`` and ``OtherGeometry`` are ``UNKNOWN``.
    """
    if isinstance(geometry, Point):
        return GeometryKind.POINT
    if isinstance(geometry, LineString):
        return GeometryKind.LINE_STRING
    if isinstance(geometry, MultiLineString):
        return GeometryKind.MULTI_LINE_STRING
    if isinstance(geometry, Polygon):
        return GeometryKind.POLYGON
    return GeometryKind.UNKNOWN


# ---------------------------------------------------------------------------
# GeoJSON conversion
# ---------------------------------------------------------------------------


def geometry_from_dict(data: object) -> Geometry | None:
    """Build a geometry variant from a GeoJSON geometry object.

    Returns ``None`` for ``null`` geometry and for objects without a
    ``type`` string; such features carry no spatial data.
    """
    if not isinstance(data, dict):
        return None
    type_name = data.get("type")
    if not isinstance(type_name, str) or not type_name:
        return None

    variant = _VARIANTS.get(type_name)
    if variant is not None:
        return variant(coordinates=_freeze(data.get("coordinates", ())))

    members: list[Geometry] = []
    for member in data.get("geometries") or ():
        geometry = geometry_from_dict(member)
        if geometry is not None:
            members.append(geometry)
    return OtherGeometry(
        coordinates=_freeze(data.get("coordinates", ())),
        type_name=type_name,
        geometries=tuple(members),
    )


def _freeze(value: object) -> object:
    if isinstance(value, list | tuple):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: object) -> object:
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value
