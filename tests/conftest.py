"""Shared pytest fixtures for the KML Viewer test suite."""

from pathlib import Path

import pytest

from kml_viewer.models.feature import Feature, FeatureCollection
from kml_viewer.models.geometry import LineString, MultiLineString, OtherGeometry, Point, Polygon

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mixed_kml(data_dir: Path) -> Path:
    """Point, two LineStrings, a MultiGeometry of lines, a Polygon, a bare Placemark."""
    return data_dir / "01_mixed_features.kml"


@pytest.fixture()
def gx_track_kml(data_dir: Path) -> Path:
    """gx:Track, gx:MultiTrack and a mixed MultiGeometry."""
    return data_dir / "02_gx_track.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def not_kml_root(edge_cases_dir: Path) -> Path:
    """Path to well-formed XML whose root is not <kml>."""
    return edge_cases_dir / "12_not_kml_root.kml"


@pytest.fixture()
def empty_kml(edge_cases_dir: Path) -> Path:
    """Path to a valid KML with no features."""
    return edge_cases_dir / "13_empty_no_features.kml"


@pytest.fixture()
def bad_coords_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML with single-point lines and non-numeric coordinates."""
    return edge_cases_dir / "14_bad_coordinates.kml"


@pytest.fixture()
def no_namespace_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML document without the KML namespace."""
    return edge_cases_dir / "15_no_namespace.kml"


# ---------------------------------------------------------------------------
# In-memory collections
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_collection() -> FeatureCollection:
    """One feature of every kind plus a null and an unrecognised geometry."""
    return FeatureCollection(
        features=(
            Feature(Point(coordinates=(20.0, 10.0)), {"name": "Beacon"}),
            Feature(LineString(coordinates=((0.0, 0.0), (0.0, 1.0))), {"name": "Path"}),
            Feature(
                MultiLineString(coordinates=(((0, 0), (0, 1)), ((0, 1), (0, 2)))),
                {},
            ),
            Feature(Polygon(coordinates=(((1, 1), (2, 1), (2, 2), (1, 1)),)), {"name": "Lot"}),
            Feature(None, {"name": "Note"}),
            Feature(OtherGeometry(coordinates=((1, 1), (2, 2)), type_name="MultiPoint"), {}),
        )
    )
