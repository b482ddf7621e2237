"""Analysis orchestrator for uploaded KML documents.

Coordinates the pipeline steps for one document:

1. Convert KML markup (activity) — produce the FeatureCollection
2. Compute each requested view independently:
   summary, details, envelope, features

The views do not depend on one another and never mutate the collection,
so any subset can be computed in any order.  Conversion failures raise
before any builder runs; the builders themselves never raise.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from kml_viewer.activities.build_details import build_details
from kml_viewer.activities.build_envelope import build_envelope
from kml_viewer.activities.parse_kml import parse_kml_text
from kml_viewer.activities.summarize import summarize
from kml_viewer.core.config import ViewerConfig
from kml_viewer.core.constants import AnalysisView
from kml_viewer.models.report import AnalysisReport, DetailItem, EnvelopeBounds

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kml_viewer.models.feature import FeatureCollection

logger = logging.getLogger("kml_viewer.orchestrators.kml_pipeline")


def analyze_kml(
    content: str | bytes,
    *,
    source_filename: str = "",
    views: Iterable[AnalysisView] | None = None,
    config: ViewerConfig | None = None,
) -> AnalysisReport:
    """Convert KML markup and compute the requested views.

    Args:
        content: Raw KML markup.
        source_filename: Original filename, used in logs and the report.
        views: Views to compute; ``config.default_views`` when ``None``.
        config: Viewer configuration; defaults when ``None``.

    Returns:
        The assembled ``AnalysisReport``.

    Raises:
        KmlParseError: If the markup cannot be converted.
    """
    started = time.perf_counter()
    collection = parse_kml_text(content, source_filename=source_filename)
    report = analyze_collection(collection, views=views, config=config)
    report.duration_s = round(time.perf_counter() - started, 6)
    return report


def analyze_collection(
    collection: FeatureCollection,
    *,
    views: Iterable[AnalysisView] | None = None,
    config: ViewerConfig | None = None,
) -> AnalysisReport:
    """Compute the requested views over an already-converted collection."""
    config = config or ViewerConfig()
    selected = frozenset(views) if views is not None else config.default_views
    started = time.perf_counter()

    report = AnalysisReport(
        source_file=collection.source_file,
        document_name=collection.name,
        feature_count=len(collection),
        fit_padding_px=[config.fit_padding_px, config.fit_padding_px],
    )

    if AnalysisView.SUMMARY in selected:
        report.summary = summarize(collection)

    if AnalysisView.DETAILS in selected:
        entries = build_details(
            collection,
            join_sublines=config.detail_join_sublines,
            unnamed_label=config.unnamed_label,
        )
        report.details = [DetailItem.from_entry(e) for e in entries]

    if AnalysisView.ENVELOPE in selected:
        envelope = build_envelope(collection)
        report.envelope = EnvelopeBounds.from_envelope(envelope) if envelope else None

    if AnalysisView.FEATURES in selected:
        report.features = collection.to_dict()

    report.duration_s = round(time.perf_counter() - started, 6)

    logger.info(
        "Analysis complete | source=%s | features=%d | views=%s | lines=%s | envelope=%s",
        collection.source_file or "<upload>",
        len(collection),
        ",".join(sorted(v.value for v in selected)),
        len(report.details) if report.details is not None else "-",
        "valid" if report.envelope is not None else "none",
    )

    return report
