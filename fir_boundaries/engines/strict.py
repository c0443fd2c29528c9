"""
Strict mode: report every defect, change nothing.
"""

import logging
from typing import List

from .base import Mode, ModeEngine, check_duplicate_bases
from ..errors import (
    BoundingBoxField, BoundingBoxMismatch, DuplicatePoints, ExtensionNotAdjacent,
    WrongWindingDirection,
)
from ..models.fir_boundary import BOUNDING_BOX_FIELDS, FIRBoundary
from ..models.fir_collection import FIRCollection
from ..models.validation import ErrorCollector
from ..utils.ordered_set import OrderedSet
from ..utils.orientation import Fill

logger = logging.getLogger(__name__)


class ValidationEngine(ModeEngine):
    """
    Validate records without repairing them.

    Per record: winding direction, duplicate vertices and declared against
    computed bounding box. Per collection: duplicate base identities (fatal)
    and extensions that do not directly follow their base.
    """

    mode = Mode.STRICT

    def check_record(self, record: FIRBoundary, collector: ErrorCollector) -> FIRBoundary:
        if record.fill() is Fill.HOLE:
            collector.add_error(WrongWindingDirection(record.icao))

        duplicates = OrderedSet(record.boundary_corners).duplicates
        if duplicates:
            collector.add_error(DuplicatePoints(record.icao, duplicates))

        mismatches = self._bounding_box_mismatches(record)
        if mismatches:
            collector.add_error(BoundingBoxMismatch(record.icao, mismatches))
        return record

    def finalize(self, collection: FIRCollection, collector: ErrorCollector) -> FIRCollection:
        check_duplicate_bases(collection)
        offenders = misplaced_extensions(collection)
        if offenders:
            collector.add_error(ExtensionNotAdjacent(offenders))
        return collection

    @staticmethod
    def _bounding_box_mismatches(record: FIRBoundary) -> List[BoundingBoxField]:
        declared = record.bounding_box
        computed = record.computed_bounding_box()
        return [
            BoundingBoxField(getattr(declared, name), getattr(computed, name), name)
            for name in BOUNDING_BOX_FIELDS
            if getattr(declared, name) != getattr(computed, name)
        ]


def misplaced_extensions(collection: FIRCollection) -> List[str]:
    """
    Icao codes of extensions not found where the base-then-extensions order puts them.

    The record at reordered position k is expected to carry the k-th smallest
    sequence id of the collection.
    """
    slots = sorted(f.sequence_id for f in collection)
    offenders: List[str] = []
    for expected, record in zip(slots, collection.reordered()):
        if record.is_extension and record.sequence_id != expected:
            logger.debug(f"Extension {record.icao} #{record.sequence_id} expected at #{expected}")
            if record.icao not in offenders:
                offenders.append(record.icao)
    return offenders
