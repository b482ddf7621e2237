"""Azure Functions entry point — KML Viewer analysis service.

This module registers the HTTP triggers using the Python v2 programming
model.  Each trigger takes raw KML markup as the request body:

- ``POST /api/kml/summary``  — count per geometry kind
- ``POST /api/kml/details``  — great-circle length per line feature
- ``POST /api/kml/envelope`` — bounding envelope for viewport fitting
- ``POST /api/kml/analyze``  — any combination via ``?views=...``

All business logic lives in the kml_viewer package. This file is purely
the wiring layer between Azure Functions bindings and application code.
"""

from __future__ import annotations

import logging

import azure.functions as func

from kml_viewer.core.config import ViewerConfig
from kml_viewer.core.constants import AnalysisView
from kml_viewer.core.ingress import handle_analysis_request, new_correlation_id

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger = logging.getLogger("kml_viewer.function_app")

# Fail fast on bad app settings at cold start.
CONFIG = ViewerConfig.from_env()

_JSON = "application/json"


def _respond(
    req: func.HttpRequest,
    *,
    views: frozenset[AnalysisView] | None = None,
) -> func.HttpResponse:
    correlation_id = req.headers.get("x-correlation-id") or new_correlation_id()
    source_filename = req.params.get("filename", "")
    try:
        status_code, body = handle_analysis_request(
            req.get_body(),
            config=CONFIG,
            views=views,
            views_param=req.params.get("views"),
            source_filename=source_filename,
            correlation_id=correlation_id,
        )
    except Exception:
        logger.exception(
            "Unhandled error analysing KML | source=%s | correlation_id=%s",
            source_filename or "<upload>",
            correlation_id,
        )
        raise

    return func.HttpResponse(
        body,
        status_code=status_code,
        mimetype=_JSON,
        headers={"x-correlation-id": correlation_id},
    )


# ---------------------------------------------------------------------------
# Single-view triggers
# ---------------------------------------------------------------------------


@app.function_name("kml_summary")
@app.route(route="kml/summary", methods=["POST"])
def kml_summary(req: func.HttpRequest) -> func.HttpResponse:
    """Count features per geometry kind."""
    return _respond(req, views=frozenset({AnalysisView.SUMMARY}))


@app.function_name("kml_details")
@app.route(route="kml/details", methods=["POST"])
def kml_details(req: func.HttpRequest) -> func.HttpResponse:
    """Great-circle length of every LineString / MultiLineString feature."""
    return _respond(req, views=frozenset({AnalysisView.DETAILS}))


@app.function_name("kml_envelope")
@app.route(route="kml/envelope", methods=["POST"])
def kml_envelope(req: func.HttpRequest) -> func.HttpResponse:
    """Bounding envelope plus the padding a map client should fit with."""
    return _respond(req, views=frozenset({AnalysisView.ENVELOPE}))


# ---------------------------------------------------------------------------
# Combined trigger
# ---------------------------------------------------------------------------


@app.function_name("kml_analyze")
@app.route(route="kml/analyze", methods=["POST"])
def kml_analyze(req: func.HttpRequest) -> func.HttpResponse:
    """Compute the views named in ``?views=`` (default: configured views)."""
    return _respond(req)
