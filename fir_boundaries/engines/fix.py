"""
Fix mode: repair duplicate vertices, winding and bounding boxes.
"""

import logging

from .base import Mode, ModeEngine
from ..errors import NormalizationError
from ..models.fir_boundary import FIRBoundary
from ..models.validation import ErrorCollector
from ..utils.ordered_set import OrderedSet
from ..utils.orientation import Fill, polygon_or_hole

logger = logging.getLogger(__name__)


class NormalizationEngine(ModeEngine):
    """
    Normalize records in place.

    Duplicate vertices are dropped (first occurrence kept), clockwise rings
    are reversed and the bounding box is recomputed from the final ring.
    Extension ordering is left as it is.
    """

    mode = Mode.FIX

    def check_record(self, record: FIRBoundary, collector: ErrorCollector) -> FIRBoundary:
        corners = OrderedSet(record.boundary_corners)
        removed = len(record.boundary_corners) - len(corners)
        if removed:
            logger.debug(f"{record.icao}: removed {removed} duplicate points")

        if polygon_or_hole(corners.to_list(), record.icao) is Fill.HOLE:
            corners.reverse()
            if polygon_or_hole(corners.to_list(), record.icao) is not Fill.POLYGON:
                raise NormalizationError(f"{record.icao}: reversed ring is still a hole")
            logger.debug(f"{record.icao}: reversed winding direction")

        record.boundary_corners = corners.to_list()
        record.bounding_box = record.computed_bounding_box()
        return record
