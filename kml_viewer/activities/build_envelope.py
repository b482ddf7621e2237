"""Envelope builder: bounding rectangle for viewport fitting.

Walks the coordinates of every Point, LineString and MultiLineString
feature and folds each usable pair into an ``Envelope`` as
``(lat, lon)``.  Polygons are counted by the summary but not walked
here, and features without geometry are skipped.

Returns ``None`` when no usable coordinate was folded; a map client then
keeps its default view.  The pixel padding applied when fitting is a
presentation setting (``ViewerConfig.fit_padding_px``), not part of the
envelope.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_viewer.models.analysis import Envelope
from kml_viewer.models.geometry import GeometryKind
from kml_viewer.utils.geodesy import is_usable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from kml_viewer.models.feature import Feature

logger = logging.getLogger("kml_viewer.activities.build_envelope")


def build_envelope(collection: Iterable[Feature]) -> Envelope | None:
    """Compute the minimal envelope over all usable coordinates.

    Args:
        collection: A ``FeatureCollection`` (or any iterable of features).

    Returns:
        The folded ``Envelope``, or ``None`` if it never became valid.
    """
    envelope = Envelope()
    skipped = 0
    for feature in collection:
        if feature.geometry is None:
            continue
        for pair in _iter_pairs(feature.kind, feature.geometry.coordinates):
            if not is_usable(pair):
                skipped += 1
                continue
            lon, lat = pair[0], pair[1]  # type: ignore[index]
            envelope.extend(lat, lon)

    if skipped:
        logger.debug("Envelope skipped %d unusable coordinate(s)", skipped)

    if not envelope.is_valid:
        return None
    return envelope


def _iter_pairs(kind: GeometryKind, coordinates: object) -> Iterator[object]:
    """Yield the raw coordinate pairs reachable for *kind*."""
    if kind is GeometryKind.POINT:
        yield coordinates
    elif kind is GeometryKind.LINE_STRING:
        if isinstance(coordinates, list | tuple):
            yield from coordinates
    elif kind is GeometryKind.MULTI_LINE_STRING and isinstance(coordinates, list | tuple):
        for line in coordinates:
            if isinstance(line, list | tuple):
                yield from line
