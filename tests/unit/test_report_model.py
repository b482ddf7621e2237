"""Tests for the analysis report pydantic model."""

from __future__ import annotations

import json

from kml_viewer.models.analysis import DetailEntry, Envelope
from kml_viewer.models.geometry import GeometryKind
from kml_viewer.models.report import SCHEMA_VERSION, AnalysisReport, DetailItem, EnvelopeBounds


class TestAnalysisReport:
    """Serialisation shape of the report."""

    def test_schema_alias(self) -> None:
        data = json.loads(AnalysisReport().to_json())
        assert data["$schema"] == SCHEMA_VERSION
        assert "schema_version" not in data

    def test_unrequested_views_are_null(self) -> None:
        data = AnalysisReport().to_dict()
        assert data["summary"] is None
        assert data["details"] is None
        assert data["envelope"] is None
        assert data["features"] is None

    def test_default_padding(self) -> None:
        assert AnalysisReport().fit_padding_px == [50, 50]

    def test_populate_by_name(self) -> None:
        report = AnalysisReport(schema_version="custom")
        assert report.to_dict()["$schema"] == "custom"

    def test_generated_at_is_utc(self) -> None:
        assert AnalysisReport().generated_at.endswith("+00:00")

    def test_indent(self) -> None:
        assert "\n" in AnalysisReport().to_json(indent=2)

    def test_nan_coordinates_serialise_as_null(self) -> None:
        report = AnalysisReport(
            features={
                "type": "FeatureCollection",
                "features": [
                    {
                        "type": "Feature",
                        "geometry": {"type": "Point", "coordinates": [float("nan"), 1.0]},
                        "properties": {},
                    }
                ],
            }
        )
        data = json.loads(report.to_json())
        assert data["features"]["features"][0]["geometry"]["coordinates"] == [None, 1.0]


class TestViewItems:
    """Conversion from builder value types."""

    def test_detail_item_from_entry(self) -> None:
        item = DetailItem.from_entry(DetailEntry(GeometryKind.MULTI_LINE_STRING, "3.50", "Legs"))
        assert item.model_dump() == {"name": "Legs", "type": "MultiLineString", "length": "3.50"}

    def test_envelope_bounds_from_envelope(self) -> None:
        envelope = Envelope()
        envelope.extend(1.0, 2.0)
        envelope.extend(-3.0, 4.0)
        bounds = EnvelopeBounds.from_envelope(envelope)
        assert bounds.model_dump() == {"south": -3.0, "west": 2.0, "north": 1.0, "east": 4.0}
