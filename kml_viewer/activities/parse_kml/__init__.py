"""KML conversion activity — composable pipeline.

Converts KML markup into a GeoJSON-style ``FeatureCollection`` that the
analytical builders consume.

The conversion pipeline is split into focused stages:
- **_validation**: empty document, XML well-formedness, KML root check
- **_normalization**: coordinate text, gx:coord, properties, ExtendedData
- **_lxml_parser**: element-tree walk from Placemarks to features

Supported KML structures:
- Point, LineString, LinearRing, Polygon (with inner boundaries)
- MultiGeometry (line-only members become a MultiLineString)
- gx:Track and gx:MultiTrack
- Nested Document/Folder hierarchies
- ExtendedData/Data and Schema/SchemaData typed metadata
- Placemarks without geometry (kept, with ``geometry=None``)

Malformed markup raises ``KmlParseError`` and no collection is
produced.  Malformed coordinates do not raise; they are carried through
for the builders to skip.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from kml_viewer.activities.parse_kml._constants import GX_NAMESPACE, KML_NAMESPACE
from kml_viewer.activities.parse_kml._lxml_parser import parse_with_lxml
from kml_viewer.activities.parse_kml._normalization import (
    extract_extended_data,
    extract_properties,
    parse_coordinates_text,
    parse_gx_coord,
)
from kml_viewer.activities.parse_kml._validation import (
    KmlParseError,
    KmlValidationError,
    validate_xml,
)

if TYPE_CHECKING:
    from pathlib import Path

    from kml_viewer.models.feature import FeatureCollection

logger = logging.getLogger("kml_viewer.activities.parse_kml")

# Leading BOM and XML declaration of already-decoded markup
_XML_DECLARATION = re.compile(r"\A\ufeff?\s*<\?xml[^>]*\?>")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "GX_NAMESPACE",
    "KML_NAMESPACE",
    "KmlParseError",
    "KmlValidationError",
    "extract_extended_data",
    "extract_properties",
    "parse_coordinates_text",
    "parse_gx_coord",
    "parse_kml_file",
    "parse_kml_text",
    "parse_with_lxml",
    "validate_xml",
]


def parse_kml_text(content: str | bytes, *, source_filename: str = "") -> FeatureCollection:
    """Convert KML markup into a ``FeatureCollection``.

    Args:
        content: Raw KML markup.  ``str`` input is already decoded, so its
            XML declaration is dropped and the text re-encoded as UTF-8;
            pass ``bytes`` to let the declaration pick the encoding.
        source_filename: Original filename, used in logs and errors.

    Returns:
        One feature per Placemark, in document order.  Empty if the
        document has no Placemarks.

    Raises:
        KmlParseError: If the markup is empty or not valid XML.
        KmlValidationError: If the XML root is not a KML element.
    """
    if isinstance(content, str):
        content = _XML_DECLARATION.sub("", content, count=1).encode("utf-8")

    label = source_filename or "<upload>"
    logger.info("Parsing KML document: %s (%d bytes)", label, len(content))

    root = validate_xml(content, source_filename)
    collection = parse_with_lxml(root, source_filename)

    logger.info("Converted %d feature(s) from %s", len(collection), label)
    return collection


def parse_kml_file(kml_path: Path | str, *, source_filename: str = "") -> FeatureCollection:
    """Read a KML file from disk and convert it.

    Args:
        kml_path: Filesystem path to the KML file (str or pathlib.Path).
        source_filename: Original filename (defaults to the path name).

    Raises:
        KmlParseError: If the file cannot be read or is not valid KML.
    """
    from pathlib import Path

    kml_path = Path(kml_path)
    if not source_filename:
        source_filename = kml_path.name

    try:
        content = kml_path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read KML file: {exc}"
        raise KmlParseError(msg) from exc

    return parse_kml_text(content, source_filename=source_filename)
