"""KML Viewer analysis service.

Converts uploaded KML documents into a GeoJSON-style feature collection
and derives the analytical views shown next to the map: geometry-type
counts, per-line great-circle lengths, and the bounding envelope used to
fit the viewport.
"""

__version__ = "0.1.0"
