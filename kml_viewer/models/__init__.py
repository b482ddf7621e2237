"""Data models and schemas.

Defines the data structures used throughout the service:
- Geometry variants and the geometry classifier
- Feature / FeatureCollection: converted KML Placemarks
- DetailEntry / Envelope: values produced by the analytical builders
- AnalysisReport: JSON report returned to clients
"""

from kml_viewer.models.analysis import DetailEntry, Envelope
from kml_viewer.models.feature import Feature, FeatureCollection
from kml_viewer.models.geometry import (
    LINE_KINDS,
    RECOGNISED_KINDS,
    Geometry,
    GeometryKind,
    LineString,
    MultiLineString,
    OtherGeometry,
    Point,
    Polygon,
    classify,
    geometry_from_dict,
)

__all__ = [
    "LINE_KINDS",
    "RECOGNISED_KINDS",
    "DetailEntry",
    "Envelope",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "GeometryKind",
    "LineString",
    "MultiLineString",
    "OtherGeometry",
    "Point",
    "Polygon",
    "classify",
    "geometry_from_dict",
]
