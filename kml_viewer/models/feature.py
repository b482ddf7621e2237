"""Data model for a converted KML document.

A ``Feature`` is one Placemark: an optional geometry plus its
properties (name, description, ExtendedData).  A ``FeatureCollection``
is the ordered sequence of features converted from one KML document.
This is the output of the parse_kml activity and the input to every
analytical builder.

Both models round-trip through GeoJSON-style dicts so that collections
produced by other converters can be analysed directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kml_viewer.models.geometry import Geometry, GeometryKind, classify, geometry_from_dict

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class Feature:
    """A single feature extracted from a KML Placemark.

    Attributes:
        geometry: The feature geometry, or ``None`` for a Placemark
            without spatial data.
        properties: Key-value properties (``name``, ``description``,
            ``styleUrl`` and ExtendedData fields).
    """

    geometry: Geometry | None = None
    properties: dict[str, object] = field(default_factory=dict)

    @property
    def kind(self) -> GeometryKind:
        return classify(self.geometry)

    @property
    def name(self) -> str:
        """The ``name`` property as a string, ``""`` when absent."""
        value = self.properties.get("name")
        return "" if value is None else str(value)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON Feature object."""
        return {
            "type": "Feature",
            "geometry": self.geometry.to_dict() if self.geometry is not None else None,
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Feature:
        """Deserialise from a GeoJSON Feature object.

        A missing ``properties`` member becomes ``{}``.

        Raises:
            TypeError: If ``properties`` is neither an object nor null.
        """
        properties_raw = data.get("properties")
        if properties_raw is None:
            properties_raw = {}
        if not isinstance(properties_raw, dict):
            msg = f"properties must be a dict, got {type(properties_raw).__name__}"
            raise TypeError(msg)

        return cls(
            geometry=geometry_from_dict(data.get("geometry")),
            properties={str(k): v for k, v in properties_raw.items()},
        )


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    """Ordered, immutable sequence of features from one document.

    Attributes:
        features: Features in document order.
        name: Document ``<name>``, if any.
        source_file: Name of the source KML file.
    """

    features: tuple[Feature, ...] = ()
    name: str = ""
    source_file: str = ""

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON FeatureCollection object."""
        return {
            "type": "FeatureCollection",
            "features": [f.to_dict() for f in self.features],
        }

    @classmethod
    def from_dict(cls, data: dict[str, object], *, source_file: str = "") -> FeatureCollection:
        """Deserialise from a GeoJSON FeatureCollection object.

        Raises:
            TypeError: If ``features`` is not a list or contains a
                non-object entry.
        """
        features_raw = data.get("features", [])
        if not isinstance(features_raw, list):
            msg = f"features must be a list, got {type(features_raw).__name__}"
            raise TypeError(msg)

        features: list[Feature] = []
        for idx, item in enumerate(features_raw):
            if not isinstance(item, dict):
                msg = f"features[{idx}] must be a dict, got {type(item).__name__}"
                raise TypeError(msg)
            features.append(Feature.from_dict(item))

        return cls(
            features=tuple(features),
            name=str(data.get("name", "") or ""),
            source_file=source_file,
        )
