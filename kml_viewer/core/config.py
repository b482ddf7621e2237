"""Viewer configuration loaded from environment variables.

All configuration values have sensible defaults matching the
browser viewer.  Azure Functions app settings (or ``local.settings.json``
for local dev) are the source of truth.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range.  This catches bad configuration at startup
    instead of on the first request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_viewer.core.constants import (
    DEFAULT_FIT_PADDING_PX,
    DEFAULT_MAX_UPLOAD_BYTES,
    DEFAULT_VIEWS,
    UNNAMED_FEATURE,
    AnalysisView,
    parse_views,
)
from kml_viewer.core.exceptions import ContractError, ValidationError

_TRUE_LITERALS = frozenset({"1", "true", "yes", "on"})
_FALSE_LITERALS = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Immutable viewer configuration.

    Loaded once at function startup and threaded through the orchestrator.

    Attributes:
        fit_padding_px: Pixel padding clients apply when fitting the envelope.
        max_upload_bytes: Largest accepted KML request body.
        detail_join_sublines: Measure a MultiLineString as one path joined
            end to end (``True``) or sum each sub-line separately (``False``).
        unnamed_label: Display name for line features without a name.
        default_views: Views computed when a request names none.
    """

    fit_padding_px: int = DEFAULT_FIT_PADDING_PX
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    detail_join_sublines: bool = True
    unnamed_label: str = UNNAMED_FEATURE
    default_views: frozenset[AnalysisView] = DEFAULT_VIEWS

    @classmethod
    def from_env(cls) -> ViewerConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range, a boolean
                literal is not recognised, or a view name is unknown.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``FIT_PADDING_PX=abc``).
        """
        raw_views = os.getenv("DEFAULT_VIEWS", "")
        try:
            default_views = parse_views(raw_views) if raw_views.strip() else DEFAULT_VIEWS
        except ContractError as exc:
            raise ConfigValidationError("DEFAULT_VIEWS", raw_views, exc.message) from exc

        config = cls(
            fit_padding_px=int(os.getenv("FIT_PADDING_PX", str(DEFAULT_FIT_PADDING_PX))),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))),
            detail_join_sublines=_parse_bool(
                "DETAIL_JOIN_SUBLINES", os.getenv("DETAIL_JOIN_SUBLINES", "true")
            ),
            unnamed_label=os.getenv("UNNAMED_LABEL", UNNAMED_FEATURE),
            default_views=default_views,
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false)")


def _validate(config: ViewerConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.fit_padding_px < 0:
        raise ConfigValidationError(
            "FIT_PADDING_PX",
            config.fit_padding_px,
            "must be >= 0 (pixels)",
        )

    if config.max_upload_bytes <= 0:
        raise ConfigValidationError(
            "MAX_UPLOAD_BYTES",
            config.max_upload_bytes,
            "must be > 0 (bytes)",
        )

    if not config.unnamed_label.strip():
        raise ConfigValidationError(
            "UNNAMED_LABEL",
            config.unnamed_label,
            "must not be empty",
        )
