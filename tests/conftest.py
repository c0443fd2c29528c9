import pytest
from decimal import Decimal
from pathlib import Path
from typing import List, Sequence, Tuple

from fir_boundaries.models.fir_boundary import FIRBoundary
from fir_boundaries.models.geo_point import GeoPoint
from fir_boundaries.utils.bounding_box import compute_bounding_box


def points(pairs: Sequence[Tuple]) -> List[GeoPoint]:
    """Build points from (lat, lon) pairs."""
    return [GeoPoint(Decimal(str(lat)), Decimal(str(lon))) for lat, lon in pairs]


def make_boundary(icao: str, corners: Sequence[Tuple], sequence_id: int = 0,
                  is_oceanic: bool = False, is_extension: bool = False,
                  bbox: Tuple = None, label: Tuple = (0, 0)) -> FIRBoundary:
    """Build a record, the declared bounding box defaults to the computed one."""
    ring = points(corners)
    box = [Decimal(str(v)) for v in bbox] if bbox else list(compute_bounding_box(ring))
    return FIRBoundary(
        sequence_id=sequence_id,
        icao=icao,
        is_oceanic=is_oceanic,
        is_extension=is_extension,
        min_lat=box[0],
        min_lon=box[1],
        max_lat=box[2],
        max_lon=box[3],
        label=points([label])[0],
        boundary_corners=ring,
    )


def record_lines(icao: str, corners: Sequence[Tuple], is_oceanic: bool = False,
                 is_extension: bool = False, bbox: Tuple = None, label: Tuple = (0, 0)) -> List[str]:
    """Native format lines for one record."""
    return make_boundary(icao, corners, is_oceanic=is_oceanic, is_extension=is_extension,
                         bbox=bbox, label=label).to_dat_lines()


# Clockwise in (lon, lat), the outer boundary convention
SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def sample_dat_path(test_assets_dir) -> Path:
    return test_assets_dir / 'FIRBoundaries.dat'


@pytest.fixture
def sample_lines(sample_dat_path) -> List[str]:
    """Lines of the sample file without terminators."""
    return sample_dat_path.read_text().splitlines()
