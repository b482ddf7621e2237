"""Thin ingress boundary helpers for the HTTP entrypoints.

Centralises the transport concerns so that ``function_app.py`` contains
only trigger bindings and handoff:

- **decode_kml_body** — rejects empty and oversized request bodies.
- **resolve_views** — turns the ``views`` query parameter into a set of
  ``AnalysisView`` values.
- **handle_analysis_request** — runs the orchestrator and maps domain
  errors to an HTTP status code and a structured JSON error body.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import TYPE_CHECKING

from kml_viewer.core.constants import parse_views
from kml_viewer.core.exceptions import ContractError, ValidationError, ViewerError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kml_viewer.core.config import ViewerConfig
    from kml_viewer.core.constants import AnalysisView

logger = logging.getLogger("kml_viewer.core.ingress")


class RequestTooLargeError(ValidationError):
    """Raised when a request body exceeds ``max_upload_bytes``."""

    default_stage = "ingress"
    default_code = "REQUEST_TOO_LARGE"
    status_code = 413


# ---------------------------------------------------------------------------
# Request decoding
# ---------------------------------------------------------------------------


def decode_kml_body(body: bytes | None, *, max_bytes: int) -> bytes:
    """Validate the raw request body carrying KML markup.

    Raises:
        ContractError: If the body is missing or blank.
        RequestTooLargeError: If the body is larger than *max_bytes*.
    """
    if not body or not body.strip():
        msg = "Request body is empty; expected KML markup"
        raise ContractError(msg, stage="ingress", code="EMPTY_BODY")
    if len(body) > max_bytes:
        msg = f"Request body is {len(body)} bytes, limit is {max_bytes} bytes"
        raise RequestTooLargeError(msg)
    return body


def resolve_views(
    raw: str | None,
    config: ViewerConfig,
) -> frozenset[AnalysisView]:
    """Resolve the ``views`` query parameter, falling back to the config default.

    Raises:
        ContractError: If a view name is unknown.
    """
    if raw is None or not raw.strip():
        return config.default_views
    return parse_views(raw)


def new_correlation_id() -> str:
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# Request handling
# ---------------------------------------------------------------------------


def handle_analysis_request(
    body: bytes | None,
    *,
    config: ViewerConfig,
    views: Iterable[AnalysisView] | None = None,
    views_param: str | None = None,
    source_filename: str = "",
    correlation_id: str = "",
) -> tuple[int, str]:
    """Analyse a KML request body and build the HTTP response payload.

    Exactly one of *views* (fixed by the route) or *views_param* (the
    raw query parameter) is normally given; with neither, the
    configured default views are computed.

    Returns:
        ``(status_code, json_body)``.  Domain errors become a 4xx status
        with ``{"error": {...}}``; unexpected exceptions propagate.
    """
    from kml_viewer.orchestrators.kml_pipeline import analyze_kml

    correlation_id = correlation_id or new_correlation_id()
    try:
        selected = frozenset(views) if views is not None else resolve_views(views_param, config)
        content = decode_kml_body(body, max_bytes=config.max_upload_bytes)
        report = analyze_kml(
            content,
            source_filename=source_filename,
            views=selected,
            config=config,
        )
    except ViewerError as exc:
        exc.correlation_id = exc.correlation_id or correlation_id
        logger.warning(
            "Request rejected | code=%s | stage=%s | status=%d | correlation_id=%s | %s",
            exc.code,
            exc.stage,
            exc.status_code,
            correlation_id,
            exc.message,
        )
        return exc.status_code, json.dumps({"error": exc.to_error_dict()})

    logger.info(
        "Request analysed | source=%s | features=%d | correlation_id=%s",
        source_filename or "<upload>",
        report.feature_count,
        correlation_id,
    )
    return 200, report.to_json()
