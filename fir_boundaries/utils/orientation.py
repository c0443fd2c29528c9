"""
Ring orientation from the signed (shoelace) area.

Longitude is used as x and latitude as y. A negative sum marks the outer
boundary of an FIR (``Fill.POLYGON``), a positive sum a ``Fill.HOLE``.
All arithmetic stays in ``Decimal``.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional, Sequence, TYPE_CHECKING

from ..errors import DegenerateRing

if TYPE_CHECKING:
    from ..models.geo_point import GeoPoint


class Fill(Enum):
    POLYGON = "polygon"
    HOLE = "hole"


def shoelace_sum(ring: Sequence['GeoPoint']) -> Decimal:
    """
    Sum of ``x_i * y_(i+1) - x_(i+1) * y_i`` over consecutive points.

    The ring does not need to repeat its first point: the closing edge back
    to the first point is always included (it contributes nothing when the
    ring is already closed).

    This differs from summing consecutive pairs only: an open ring gets the
    same sign as its closed form, and a two point ring always sums to zero.
    """
    total = Decimal(0)
    count = len(ring)
    for i in range(count):
        current = ring[i]
        following = ring[(i + 1) % count]
        total += current.longitude * following.latitude - following.longitude * current.latitude
    return total


def polygon_or_hole(ring: Sequence['GeoPoint'], icao: Optional[str] = None) -> Fill:
    """
    Classify a ring.

    Raises:
        DegenerateRing: if the signed area is zero
    """
    total = shoelace_sum(ring)
    if total == 0:
        raise DegenerateRing(icao)
    return Fill.POLYGON if total < 0 else Fill.HOLE
