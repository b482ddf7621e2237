"""Unified exception taxonomy.

Provides a shared base exception hierarchy for the conversion stage,
configuration and the HTTP ingress layer.  Every domain exception
inherits from ``ViewerError`` and carries structured context fields
that enable consistent status-code mapping and operator diagnostics.

Taxonomy categories
-------------------
- ``ValidationError``   — input violations (bad markup, oversized body).
- ``ContractError``     — request/payload shape violations.

The analytical builders never raise: missing geometry, malformed
coordinates and degenerate lines are absorbed as skip/zero outcomes.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for HTTP responses and logging.
"""

from __future__ import annotations


class ViewerError(Exception):
    """Base exception for all viewer-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"parse_kml"``, ``"ingress"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
        correlation_id: Request correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""
    #: HTTP status reported by the ingress layer.
    status_code: int = 500

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ViewerError):
    """Input or domain-model validation failure."""

    status_code = 400


class ContractError(ViewerError):
    """Request or payload shape violation."""

    status_code = 400
