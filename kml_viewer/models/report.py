"""Pydantic model of the analysis report returned to clients.

The report bundles whichever views were requested for one KML
document:

- **summary**: count per geometry kind (all four kinds, zero-filled)
- **details**: per-line great-circle lengths, in document order
- **envelope**: bounding rectangle for viewport fitting, ``null`` when
  the document has no usable coordinates
- **features**: the converted GeoJSON FeatureCollection for rendering

Views that were not requested are ``null`` so the JSON shape is always
structurally complete.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from kml_viewer.core.constants import DEFAULT_FIT_PADDING_PX

if TYPE_CHECKING:
    from kml_viewer.models.analysis import DetailEntry, Envelope

# Schema version for forward compatibility
SCHEMA_VERSION = "kml-analysis-v1"


class DetailItem(BaseModel):
    """One row of the details table.

    Attributes:
        name: Feature display name (``"Unnamed"`` fallback).
        type: ``"LineString"`` or ``"MultiLineString"``.
        length: Length in kilometres formatted ``"%.2f"``.
    """

    name: str
    type: str
    length: str

    @classmethod
    def from_entry(cls, entry: DetailEntry) -> DetailItem:
        return cls(**entry.to_dict())


class EnvelopeBounds(BaseModel):
    """Bounding rectangle in degrees (WGS 84)."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_envelope(cls, envelope: Envelope) -> EnvelopeBounds:
        return cls(**envelope.to_dict())


class AnalysisReport(BaseModel):
    """Top-level analysis report for one KML document.

    Attributes:
        schema_version: Schema identifier for forward compatibility.
        source_file: Name of the uploaded KML file, if known.
        document_name: The KML ``Document/name``, if any.
        feature_count: Number of converted features (including those
            without geometry).
        summary: Geometry-kind counts, or ``None`` if not requested.
        details: Line lengths, or ``None`` if not requested.
        envelope: Bounding rectangle, or ``None`` when not requested or
            when no usable coordinate exists.
        fit_padding_px: ``[x, y]`` padding for viewport fitting.
        features: GeoJSON FeatureCollection, or ``None`` if not requested.
        generated_at: Report timestamp (ISO 8601, UTC).
        duration_s: Time spent converting and analysing, in seconds.
    """

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    source_file: str = ""
    document_name: str = ""
    feature_count: int = 0
    summary: dict[str, int] | None = None
    details: list[DetailItem] | None = None
    envelope: EnvelopeBounds | None = None
    fit_padding_px: list[int] = Field(
        default_factory=lambda: [DEFAULT_FIT_PADDING_PX, DEFAULT_FIT_PADDING_PX]
    )
    features: dict[str, Any] | None = None
    generated_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    duration_s: float = 0.0

    model_config = {"populate_by_name": True}

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise to a JSON string.

        Uses the ``$schema`` alias for the schema version field.
        """
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return self.model_dump(by_alias=True)  # type: ignore[return-value]
