"""lxml-based KML to FeatureCollection converter.

Walks the element tree and turns every ``<Placemark>`` (at any
Document/Folder depth, in document order) into one ``Feature``:

- ``Point`` -> Point
- ``LineString`` / ``LinearRing`` -> LineString
- ``Polygon`` -> Polygon (outer ring first, then inner rings)
- ``gx:Track`` -> LineString of its ``gx:coord`` values
- ``gx:MultiTrack`` -> MultiLineString
- ``MultiGeometry`` -> its only member when it has one, MultiLineString
  when every member is line-like, otherwise MultiPoint / MultiPolygon /
  GeometryCollection
- no geometry -> ``geometry=None``
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_viewer.activities.parse_kml._constants import (
    GEOMETRY_TAGS,
    GX_GEOMETRY_TAGS,
    GX_NAMESPACE,
)
from kml_viewer.activities.parse_kml._normalization import (
    extract_properties,
    parse_coordinates_text,
    parse_gx_coord,
)
from kml_viewer.models.feature import Feature, FeatureCollection
from kml_viewer.models.geometry import (
    Geometry,
    LineString,
    MultiLineString,
    OtherGeometry,
    Point,
    Polygon,
)

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_viewer.activities.parse_kml")

_GX = f"{{{GX_NAMESPACE}}}"


def parse_with_lxml(root: _Element, source_filename: str = "") -> FeatureCollection:
    """Convert a validated KML root element into a ``FeatureCollection``."""
    ns = _detect_namespace(root)

    doc_name = ""
    doc = root.find(f"{ns}Document")
    if doc is not None:
        name_elem = doc.find(f"{ns}name")
        if name_elem is not None and name_elem.text:
            doc_name = name_elem.text.strip()

    features: list[Feature] = []
    for pm in root.iter(f"{ns}Placemark"):
        geometry = _placemark_geometry(pm, ns)
        properties = extract_properties(pm, ns)
        if geometry is None:
            logger.debug(
                "Placemark without geometry | name=%s | source=%s",
                properties.get("name", ""),
                source_filename,
            )
        features.append(Feature(geometry=geometry, properties=properties))

    return FeatureCollection(features=tuple(features), name=doc_name, source_file=source_filename)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _detect_namespace(root: _Element) -> str:
    """Return the root namespace in Clark notation (``"{uri}"``), or ``""``."""
    tag = root.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.split("}")[0] + "}"
    return ""


def _local_name(elem: _Element, ns: str) -> str:
    """Return the local tag name for KML or gx elements, ``""`` otherwise."""
    tag = elem.tag
    if not isinstance(tag, str):
        return ""
    if ns and tag.startswith(ns):
        return tag[len(ns) :]
    if tag.startswith(_GX):
        return "gx:" + tag[len(_GX) :]
    if not ns and not tag.startswith("{"):
        return tag
    return ""


def _is_geometry_tag(name: str) -> bool:
    if name.startswith("gx:"):
        return name[3:] in GX_GEOMETRY_TAGS
    return name in GEOMETRY_TAGS


def _placemark_geometry(pm: _Element, ns: str) -> Geometry | None:
    """Convert the first geometry child of a Placemark."""
    for child in pm:
        name = _local_name(child, ns)
        if _is_geometry_tag(name):
            return _convert(child, name, ns)
    return None


def _convert(elem: _Element, name: str, ns: str) -> Geometry | None:
    if name == "Point":
        coords = _coordinates(elem, ns)
        return Point(coordinates=coords[0]) if coords else None
    if name in ("LineString", "LinearRing"):
        return LineString(coordinates=tuple(_coordinates(elem, ns)))
    if name == "Polygon":
        return _convert_polygon(elem, ns)
    if name == "gx:Track":
        return LineString(coordinates=_track_coords(elem))
    if name == "gx:MultiTrack":
        tracks = tuple(_track_coords(t) for t in elem.iter(f"{_GX}Track"))
        return MultiLineString(coordinates=tracks)
    if name == "MultiGeometry":
        return _convert_multi_geometry(elem, ns)
    return None


def _coordinates(elem: _Element, ns: str) -> list[tuple[float, ...]]:
    coords_elem = elem.find(f"{ns}coordinates")
    if coords_elem is None or not coords_elem.text:
        return []
    return parse_coordinates_text(coords_elem.text)


def _convert_polygon(elem: _Element, ns: str) -> Polygon:
    rings: list[tuple[tuple[float, ...], ...]] = []
    outer = elem.find(f"{ns}outerBoundaryIs/{ns}LinearRing")
    if outer is not None:
        rings.append(tuple(_coordinates(outer, ns)))
    for inner in elem.findall(f"{ns}innerBoundaryIs/{ns}LinearRing"):
        ring = tuple(_coordinates(inner, ns))
        if ring:
            rings.append(ring)
    return Polygon(coordinates=tuple(rings))


def _track_coords(elem: _Element) -> tuple[tuple[float, ...], ...]:
    return tuple(parse_gx_coord(c.text) for c in elem.findall(f"{_GX}coord") if c.text)


def _convert_multi_geometry(elem: _Element, ns: str) -> Geometry | None:
    members: list[Geometry] = []
    for child in elem:
        name = _local_name(child, ns)
        if not _is_geometry_tag(name):
            continue
        geometry = _convert(child, name, ns)
        if geometry is None:
            continue
        # Nested MultiGeometry members are lifted into this one
        if isinstance(geometry, OtherGeometry) and geometry.type_name == "GeometryCollection":
            members.extend(geometry.geometries)
        else:
            members.append(geometry)

    if not members:
        return None
    if len(members) == 1:
        return members[0]

    if all(isinstance(m, LineString | MultiLineString) for m in members):
        lines: list[object] = []
        for m in members:
            if isinstance(m, MultiLineString):
                lines.extend(m.coordinates)
            else:
                lines.append(m.coordinates)
        return MultiLineString(coordinates=tuple(lines))
    if all(isinstance(m, Point) for m in members):
        return OtherGeometry(
            coordinates=tuple(m.coordinates for m in members), type_name="MultiPoint"
        )
    if all(isinstance(m, Polygon) for m in members):
        return OtherGeometry(
            coordinates=tuple(m.coordinates for m in members), type_name="MultiPolygon"
        )
    return OtherGeometry(type_name="GeometryCollection", geometries=tuple(members))
