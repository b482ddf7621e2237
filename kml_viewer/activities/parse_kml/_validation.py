"""Validation helpers for KML parsing.

Responsibilities:
- Empty-document detection
- XML well-formedness (hardened lxml parser: no entities, no network)
- KML root element check

Coordinate values are not validated here. Malformed coordinates are
carried into the feature collection and skipped by the
analytical builders, one segment at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kml_viewer.activities.parse_kml._constants import KML_NAMESPACE
from kml_viewer.core.exceptions import ValidationError

if TYPE_CHECKING:
    from lxml.etree import _Element


# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class KmlParseError(ValidationError):
    """Raised when a KML document cannot be parsed."""

    default_stage = "parse_kml"
    default_code = "KML_PARSE_FAILED"


class KmlValidationError(KmlParseError):
    """Raised when a document is well-formed XML but not KML."""

    default_code = "KML_VALIDATION_FAILED"


# ---------------------------------------------------------------------------
# XML / KML validation
# ---------------------------------------------------------------------------


def validate_xml(content: bytes, source_filename: str = "") -> _Element:
    """Parse *content* as XML and check that the root is a KML element.

    Returns:
        The root element of the document.

    Raises:
        KmlParseError: If the document is empty or not valid XML.
        KmlValidationError: If the root element is not ``<kml>``.
    """
    from lxml import etree  # type: ignore[attr-defined]

    label = source_filename or "<upload>"

    if not content.strip():
        msg = f"KML document is empty: {label}"
        raise KmlParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML ({label}): {exc}"
        raise KmlParseError(msg) from exc

    tag = root.tag
    qname = etree.QName(root) if isinstance(tag, str) else None
    if qname is None or (qname.namespace != KML_NAMESPACE and qname.localname != "kml"):
        msg = f"Not a KML document ({label}) — root element is <{tag}>"
        raise KmlValidationError(msg)

    return root
