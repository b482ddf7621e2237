"""Shared constants — single source of truth.

Centralises the Earth model, display defaults and the analysis view
names that were otherwise duplicated across the builders, the
orchestrator and the HTTP ingress layer.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from kml_viewer.core.exceptions import ContractError

if TYPE_CHECKING:
    from collections.abc import Iterable

# ---------------------------------------------------------------------------
# Earth model (spherical approximation)
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM: float = 6371.0
"""Mean Earth radius used by the haversine distance."""

# ---------------------------------------------------------------------------
# Display defaults
# ---------------------------------------------------------------------------

UNNAMED_FEATURE: str = "Unnamed"
"""Label used for line features without a ``name`` property."""

LENGTH_DECIMALS: int = 2
"""Decimal places of the formatted line length (kilometres)."""

DEFAULT_FIT_PADDING_PX: int = 50
"""Pixel padding a map client applies when fitting the envelope."""

DEFAULT_MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
"""Largest KML body accepted by the HTTP ingress layer."""


# ---------------------------------------------------------------------------
# Analysis views
# ---------------------------------------------------------------------------


class AnalysisView(enum.Enum):
    """A derived view that the orchestrator can compute.

    Values:
        SUMMARY:  Count per geometry kind.
        DETAILS:  Great-circle length per line feature.
        ENVELOPE: Bounding envelope for viewport fitting.
        FEATURES: The converted GeoJSON FeatureCollection itself.
    """

    SUMMARY = "summary"
    DETAILS = "details"
    ENVELOPE = "envelope"
    FEATURES = "features"


DEFAULT_VIEWS: frozenset[AnalysisView] = frozenset(
    {AnalysisView.SUMMARY, AnalysisView.DETAILS, AnalysisView.ENVELOPE}
)


def parse_views(raw: str | Iterable[str | AnalysisView] | None) -> frozenset[AnalysisView]:
    """Resolve a comma-separated string (or iterable) of view names.

    Names are case-insensitive and surrounding whitespace is ignored.
    An empty or ``None`` input resolves to ``DEFAULT_VIEWS``.

    Raises:
        ContractError: If any name is not a known ``AnalysisView``.
    """
    if raw is None:
        return DEFAULT_VIEWS
    items = raw.split(",") if isinstance(raw, str) else list(raw)

    views: set[AnalysisView] = set()
    unknown: list[str] = []
    for item in items:
        if isinstance(item, AnalysisView):
            views.add(item)
            continue
        name = str(item).strip().lower()
        if not name:
            continue
        try:
            views.add(AnalysisView(name))
        except ValueError:
            unknown.append(name)

    if unknown:
        known = ", ".join(v.value for v in AnalysisView)
        msg = f"Unknown analysis view(s): {', '.join(unknown)} (expected one of: {known})"
        raise ContractError(msg, stage="views", code="UNKNOWN_VIEW")

    return frozenset(views) if views else DEFAULT_VIEWS
