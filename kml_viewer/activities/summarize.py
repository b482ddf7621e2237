"""Summary builder: feature count per geometry kind.

All four recognised kinds are always present in the result (zero-filled)
in the order ``Point``, ``LineString``, ``Polygon``, ``MultiLineString``.
Features with no geometry or an unrecognised geometry type are skipped
without error and do not count towards any bucket.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_viewer.models.geometry import RECOGNISED_KINDS, GeometryKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kml_viewer.models.feature import Feature

logger = logging.getLogger("kml_viewer.activities.summarize")


def summarize(collection: Iterable[Feature]) -> dict[str, int]:
    """Count features per recognised geometry kind.

    Args:
        collection: A ``FeatureCollection`` (or any iterable of features).

    Returns:
        Mapping of kind name to count, with all four kinds present.
    """
    counts: dict[GeometryKind, int] = dict.fromkeys(RECOGNISED_KINDS, 0)
    skipped = 0
    for feature in collection:
        kind = feature.kind
        if kind in counts:
            counts[kind] += 1
        else:
            skipped += 1

    if skipped:
        logger.debug("Summary skipped %d feature(s) without a recognised geometry", skipped)

    return {kind.value: count for kind, count in counts.items()}
