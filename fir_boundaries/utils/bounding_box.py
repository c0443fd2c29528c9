from decimal import Decimal
from typing import Iterable, NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.geo_point import GeoPoint

ANTIMERIDIAN_SPAN = Decimal(180)


class BoundingBox(NamedTuple):
    min_lat: Decimal
    min_lon: Decimal
    max_lat: Decimal
    max_lon: Decimal

    @property
    def crosses_antimeridian(self) -> bool:
        return self.min_lon > self.max_lon

    def to_geojson_bbox(self) -> list:
        """RFC 7946 order: west, south, east, north."""
        return [self.min_lon, self.min_lat, self.max_lon, self.max_lat]


def apply_antimeridian_rule(min_lon: Decimal, max_lon: Decimal):
    """
    Swap longitudes when the naive span is wider than 180 degrees.

    This is a heuristic: a span over 180 degrees is taken to mean the ring
    straddles the antimeridian, so the stored box goes the short way round.
    Wide rings that do not cross the antimeridian are swapped as well.
    """
    if max_lon - min_lon > ANTIMERIDIAN_SPAN:
        return max_lon, min_lon
    return min_lon, max_lon


def compute_bounding_box(points: Iterable['GeoPoint']) -> BoundingBox:
    """
    Naive min/max over the points followed by the antimeridian rule.

    Raises:
        ValueError: if there are no points
    """
    points = list(points)
    if not points:
        raise ValueError("cannot compute a bounding box without points")
    lats = [p.latitude for p in points]
    lons = [p.longitude for p in points]
    min_lon, max_lon = apply_antimeridian_rule(min(lons), max(lons))
    return BoundingBox(min(lats), min_lon, max(lats), max_lon)
