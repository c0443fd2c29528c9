from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Any, List

from .geo_point import GeoPoint, format_decimal
from ..utils.bounding_box import BoundingBox, compute_bounding_box
from ..utils.orientation import Fill, polygon_or_hole

# Native header layout:
# ICAO|IsOceanic|IsExtension|PointCount|MinLat|MinLon|MaxLat|MaxLon|LabelLat|LabelLon
HEADER_FIELDS = (
    'icao',
    'is_oceanic',
    'is_extension',
    'point_count',
    'min_lat',
    'min_lon',
    'max_lat',
    'max_lon',
    'label_lat',
    'label_lon',
)

BOUNDING_BOX_FIELDS = ('min_lat', 'min_lon', 'max_lat', 'max_lon')


def bool_to_flag(value: bool) -> str:
    return '1' if value else '0'


@dataclass
class FIRBoundary:
    """
    One record of an FIR boundary file.

    A base record describes the main ring of an FIR. Extension records share
    the icao code of their base and describe additional disjoint rings.
    ``boundary_corners`` is stored open: the first point is not repeated at
    the end.
    """

    sequence_id: int
    icao: str
    is_oceanic: bool
    is_extension: bool
    min_lat: Decimal
    min_lon: Decimal
    max_lat: Decimal
    max_lon: Decimal
    label: GeoPoint
    boundary_corners: List[GeoPoint] = field(default_factory=list)

    @property
    def identity(self):
        """Key under which base records must be unique."""
        return (self.icao, self.is_oceanic)

    @property
    def bounding_box(self) -> BoundingBox:
        """The declared bounding box."""
        return BoundingBox(self.min_lat, self.min_lon, self.max_lat, self.max_lon)

    @bounding_box.setter
    def bounding_box(self, box: BoundingBox) -> None:
        self.min_lat, self.min_lon, self.max_lat, self.max_lon = box

    def computed_bounding_box(self) -> BoundingBox:
        return compute_bounding_box(self.boundary_corners)

    def fill(self) -> Fill:
        return polygon_or_hole(self.boundary_corners, self.icao)

    def closed_ring(self) -> List[GeoPoint]:
        """Corners with the first point repeated at the end."""
        ring = list(self.boundary_corners)
        if ring and ring[0] != ring[-1]:
            ring.append(ring[0])
        return ring

    def header_line(self) -> str:
        return '|'.join([
            self.icao,
            bool_to_flag(self.is_oceanic),
            bool_to_flag(self.is_extension),
            str(len(self.boundary_corners)),
            format_decimal(self.min_lat),
            format_decimal(self.min_lon),
            format_decimal(self.max_lat),
            format_decimal(self.max_lon),
            self.label.to_dat_str(),
        ])

    def to_dat_lines(self) -> List[str]:
        """Header line followed by one line per corner, without line terminators."""
        return [self.header_line()] + [c.to_dat_str() for c in self.boundary_corners]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sequence_id': self.sequence_id,
            'icao': self.icao,
            'is_oceanic': self.is_oceanic,
            'is_extension': self.is_extension,
            'point_count': len(self.boundary_corners),
            'min_lat': self.min_lat,
            'min_lon': self.min_lon,
            'max_lat': self.max_lat,
            'max_lon': self.max_lon,
            'label_lat': self.label.latitude,
            'label_lon': self.label.longitude,
        }

    def __repr__(self) -> str:
        kind = 'extension' if self.is_extension else 'base'
        return (
            f"FIRBoundary(sequence_id={self.sequence_id}, icao={self.icao!r}, {kind}, "
            f"oceanic={self.is_oceanic}, points={len(self.boundary_corners)})"
        )
