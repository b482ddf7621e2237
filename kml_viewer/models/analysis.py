"""Value types produced by the analytical builders.

- ``DetailEntry``: one row of the per-line length table
- ``Envelope``: mutable accumulator of the minimal lat/lon rectangle

The envelope is a short-lived local of ``build_envelope``.  It tracks an
explicit empty flag instead of seeding its extrema with infinities, so
"invalid until the first fold" is a checked state rather than a
numeric accident.
"""

from __future__ import annotations

from dataclasses import dataclass

from kml_viewer.models.geometry import GeometryKind


@dataclass(frozen=True, slots=True)
class DetailEntry:
    """Length of one line-shaped feature.

    Attributes:
        kind: ``LINE_STRING`` or ``MULTI_LINE_STRING``.
        length_km: Path length in kilometres, fixed to 2 decimal places.
        name: Feature display name.
    """

    kind: GeometryKind
    length_km: str
    name: str

    def to_dict(self) -> dict[str, str]:
        """Serialise with the keys of the details table (name, type, length)."""
        return {"name": self.name, "type": self.kind.value, "length": self.length_km}


@dataclass(slots=True)
class Envelope:
    """Minimal rectangle covering every folded ``(lat, lon)`` point.

    Attributes:
        south: Minimum latitude seen.
        west: Minimum longitude seen.
        north: Maximum latitude seen.
        east: Maximum longitude seen.
        empty: ``True`` until the first point is folded in.
    """

    south: float = 0.0
    west: float = 0.0
    north: float = 0.0
    east: float = 0.0
    empty: bool = True

    def extend(self, lat: float, lon: float) -> None:
        """Fold one point into the rectangle."""
        if self.empty:
            self.south = self.north = lat
            self.west = self.east = lon
            self.empty = False
            return
        self.south = min(self.south, lat)
        self.north = max(self.north, lat)
        self.west = min(self.west, lon)
        self.east = max(self.east, lon)

    @property
    def is_valid(self) -> bool:
        return not self.empty

    def to_dict(self) -> dict[str, float]:
        return {"south": self.south, "west": self.west, "north": self.north, "east": self.east}

    def corners(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Return ``((south, west), (north, east))`` as map clients expect."""
        return ((self.south, self.west), (self.north, self.east))
