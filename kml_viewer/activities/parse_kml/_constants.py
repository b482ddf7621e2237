"""Shared constants for KML parsing."""

from __future__ import annotations

# KML 2.2 namespace
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

# Google extension namespace (gx:Track, gx:MultiTrack)
GX_NAMESPACE = "http://www.google.com/kml/ext/2.2"

# Placemark children that carry geometry (local names)
GEOMETRY_TAGS = frozenset({"Point", "LineString", "LinearRing", "Polygon", "MultiGeometry"})
GX_GEOMETRY_TAGS = frozenset({"Track", "MultiTrack"})

# Placemark children copied into feature properties (besides ExtendedData)
PROPERTY_TAGS = ("name", "description", "styleUrl")
