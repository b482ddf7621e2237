"""Coordinate and property normalization helpers for KML parsing.

Responsibilities:
- Parse KML ``<coordinates>`` text and ``<gx:coord>`` values
- Extract Placemark properties (name, description, styleUrl)
- Extract ExtendedData metadata (typed + untyped)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from kml_viewer.activities.parse_kml._constants import PROPERTY_TAGS

if TYPE_CHECKING:
    from lxml.etree import _Element

# Whitespace around the commas inside one tuple ("1, 2" is still one tuple)
_COMMA_SPACING = re.compile(r"\s*,\s*")


# ---------------------------------------------------------------------------
# Coordinate text parsing
# ---------------------------------------------------------------------------


def parse_coordinates_text(text: str) -> list[tuple[float, ...]]:
    """Parse KML coordinate text (``lon,lat[,alt] lon,lat[,alt] ...``).

    Each whitespace-separated tuple becomes one coordinate.  Altitude is
    kept as a third component when present.  A component that is empty
    or not a number becomes ``nan`` so the other components keep their
    positions (``"1,,2"`` is ``(1.0, nan, 2.0)``) and the usability check
    skips the tuple later.
    """
    coords: list[tuple[float, ...]] = []
    for token in _COMMA_SPACING.sub(",", text.strip()).split():
        coords.append(tuple(_to_float(p) for p in token.split(",")))
    return coords


def parse_gx_coord(text: str) -> tuple[float, ...]:
    """Parse one ``<gx:coord>`` value (``lon lat alt``, space-separated)."""
    return tuple(_to_float(p) for p in text.split())


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return float("nan")


# ---------------------------------------------------------------------------
# Placemark properties
# ---------------------------------------------------------------------------


def extract_properties(placemark_elem: _Element, ns: str) -> dict[str, object]:
    """Collect the properties of a Placemark.

    ``name``, ``description`` and ``styleUrl`` are included when present
    and non-empty; ExtendedData entries are merged in afterwards but
    never overwrite those three.

    Args:
        placemark_elem: The ``<Placemark>`` element.
        ns: Clark-notation namespace prefix (``"{uri}"``) or ``""``.
    """
    properties: dict[str, object] = {}
    for tag in PROPERTY_TAGS:
        elem = placemark_elem.find(f"{ns}{tag}")
        if elem is not None and elem.text and elem.text.strip():
            properties[tag] = elem.text.strip()

    for key, value in extract_extended_data(placemark_elem, ns).items():
        properties.setdefault(key, value)
    return properties


def extract_extended_data(placemark_elem: _Element, ns: str) -> dict[str, str]:
    """Extract ExtendedData metadata from a Placemark element.

    Handles both KML metadata patterns:
    - ``ExtendedData/Data/value`` — untyped key-value pairs.
    - ``ExtendedData/SchemaData/SimpleData`` — typed fields defined by a
      ``<Schema>`` element.
    """
    metadata: dict[str, str] = {}

    # Pattern 1: ExtendedData/Data/value (untyped)
    for data_elem in placemark_elem.findall(f"{ns}ExtendedData/{ns}Data"):
        key = data_elem.get("name", "")
        value_elem = data_elem.find(f"{ns}value")
        if key and value_elem is not None and value_elem.text:
            metadata[key] = value_elem.text.strip()

    # Pattern 2: ExtendedData/SchemaData/SimpleData (typed via Schema)
    for schema_data in placemark_elem.findall(f"{ns}ExtendedData/{ns}SchemaData"):
        for simple_data in schema_data.findall(f"{ns}SimpleData"):
            key = simple_data.get("name", "")
            if key and simple_data.text:
                metadata[key] = simple_data.text.strip()

    return metadata
