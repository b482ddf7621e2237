"""Detail builder: great-circle path length per line feature.

For every ``LineString`` / ``MultiLineString`` feature, in document order:

1. Normalise the coordinates to a flat ordered sequence of pairs.  A
   ``MultiLineString`` is flattened one level, so its sub-lines are
   joined end to end (``join_sublines=True``, the default).  With
   ``join_sublines=False`` each sub-line is measured on its own and the
   lengths are summed, dropping the connecting segment between them.
2. Skip the feature when fewer than two usable pairs remain.
3. Sum the haversine distance over each consecutive pair.  A segment
   touching a missing, truncated or non-numeric pair contributes
   nothing; iteration continues with the next segment.
4. Emit a ``DetailEntry`` with the length fixed to two decimals and the
   feature name (``"Unnamed"`` fallback).

Nothing here raises for malformed input.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_viewer.core.constants import LENGTH_DECIMALS, UNNAMED_FEATURE
from kml_viewer.models.analysis import DetailEntry
from kml_viewer.models.geometry import LINE_KINDS, GeometryKind
from kml_viewer.utils.geodesy import CoordinateStatus, check_coordinate, haversine_km, is_usable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from kml_viewer.models.feature import Feature

logger = logging.getLogger("kml_viewer.activities.build_details")

# Fewest usable coordinate pairs that still form a path
MIN_PATH_POINTS = 2


def build_details(
    collection: Iterable[Feature],
    *,
    join_sublines: bool = True,
    unnamed_label: str = UNNAMED_FEATURE,
) -> list[DetailEntry]:
    """Build one ``DetailEntry`` per measurable line feature.

    Args:
        collection: A ``FeatureCollection`` (or any iterable of features).
        join_sublines: Measure a MultiLineString as one joined path.
        unnamed_label: Name used when a feature has no ``name`` property.

    Returns:
        Entries in input order.  Empty if no feature is measurable.
    """
    entries: list[DetailEntry] = []
    for feature in collection:
        kind = feature.kind
        if kind not in LINE_KINDS or feature.geometry is None:
            continue

        paths = _paths(kind, feature.geometry.coordinates, join_sublines=join_sublines)
        usable = sum(1 for path in paths for pair in path if is_usable(pair))
        if usable < MIN_PATH_POINTS:
            logger.debug(
                "Skipping degenerate line | name=%s | usable_points=%d",
                feature.name or unnamed_label,
                usable,
            )
            continue

        length_km = sum(path_length_km(path) for path in paths)
        entries.append(
            DetailEntry(
                kind=kind,
                length_km=f"{length_km:.{LENGTH_DECIMALS}f}",
                name=feature.name or unnamed_label,
            )
        )

    return entries


def path_length_km(path: Sequence[object]) -> float:
    """Sum the great-circle length of consecutive usable pairs in *path*."""
    total = 0.0
    for first, second in zip(path, path[1:]):
        if (
            check_coordinate(first) is not CoordinateStatus.USABLE
            or check_coordinate(second) is not CoordinateStatus.USABLE
        ):
            continue
        lon1, lat1 = first[0], first[1]  # type: ignore[index]
        lon2, lat2 = second[0], second[1]  # type: ignore[index]
        total += haversine_km(lat1, lon1, lat2, lon2)
    return total


def flatten_lines(lines: object) -> list[object]:
    """Concatenate the sub-lines of a MultiLineString into one sequence.

    Flattens exactly one level; an element that is not itself a sequence
    is kept in place (and later skipped by the coordinate check).
    """
    if not isinstance(lines, list | tuple):
        return []
    flat: list[object] = []
    for line in lines:
        if isinstance(line, list | tuple):
            flat.extend(line)
        else:
            flat.append(line)
    return flat


def _paths(kind: GeometryKind, coordinates: object, *, join_sublines: bool) -> list[list[object]]:
    if not isinstance(coordinates, list | tuple):
        return []
    if kind is GeometryKind.LINE_STRING:
        return [list(coordinates)]
    if join_sublines:
        return [flatten_lines(coordinates)]
    return [list(line) for line in coordinates if isinstance(line, list | tuple)]
