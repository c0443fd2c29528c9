import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Tuple

from ..errors import DuplicateBaseFIR
from ..models.fir_boundary import FIRBoundary
from ..models.fir_collection import FIRCollection
from ..models.validation import ErrorCollector

logger = logging.getLogger(__name__)


class Mode(Enum):
    """How records are handled once structurally parsed."""

    STRICT = "strict"
    FIX = "fix"


class ModeEngine(ABC):
    """Base interface for the per-mode record checks."""

    mode: Mode

    @abstractmethod
    def check_record(self, record: FIRBoundary, collector: ErrorCollector) -> FIRBoundary:
        """
        Run the per-record checks right after a record was parsed.

        Args:
            record: Structurally valid record
            collector: Collector receiving recoverable errors

        Returns:
            The record to admit into the collection
        """
        pass

    def finalize(self, collection: FIRCollection, collector: ErrorCollector) -> FIRCollection:
        """
        Run the checks that need the whole collection.

        Raises:
            DuplicateBaseFIR: if a base identity is defined more than once
        """
        check_duplicate_bases(collection)
        return collection


def check_duplicate_bases(collection: FIRCollection) -> None:
    """
    Raise if two base records share the same ``(icao, is_oceanic)``.

    Raises:
        DuplicateBaseFIR: naming every duplicated identity with its count
    """
    duplicates: List[Tuple[str, bool, int]] = [
        (icao, is_oceanic, len(records))
        for (icao, is_oceanic), records in collection.bases().group_by(lambda f: f.identity).items()
        if len(records) > 1
    ]
    if duplicates:
        raise DuplicateBaseFIR(duplicates)
