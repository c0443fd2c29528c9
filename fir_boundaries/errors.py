"""
Error taxonomy for FIR boundary parsing.

Every error carries a ``fatal`` flag. Fatal errors abort the current parse
pass as soon as they are raised. Recoverable errors are collected by an
``ErrorCollector`` so that a single pass reports every independent problem
in a file.
"""

from decimal import Decimal
from typing import Any, List, NamedTuple, Sequence, Tuple


class FIRParsingError(Exception):
    """Base class for all errors raised while reading FIR boundaries."""

    fatal: bool = True


class FIRFormatError(FIRParsingError):
    """Structural problem: wrong field count, bad flag, short read."""

    def __init__(self, message: str, line_number: int = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidNumberError(FIRParsingError):
    """A decimal or integer field could not be parsed."""

    def __init__(self, field: str, value: str, line_number: int = None):
        self.field = field
        self.value = value
        self.line_number = line_number
        message = f"invalid number for {field}: {value!r}"
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class UnsupportedFormatError(FIRParsingError):
    """File extension maps to no known codec."""


class PointOutOfRange(FIRParsingError, ValueError):
    """Latitude or longitude outside of its valid range."""

    fatal = False

    def __init__(self, latitude: Any, longitude: Any):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"point out of range: latitude {latitude} must be within [-90, 90] "
            f"and longitude {longitude} within [-180, 180]"
        )


class DegenerateRing(FIRParsingError):
    """Ring has zero signed area so no orientation can be derived."""

    def __init__(self, icao: str = None):
        self.icao = icao
        where = f" for {icao}" if icao else ""
        super().__init__(f"ring{where} has zero area, all points are collinear")


class NormalizationError(FIRParsingError):
    """A repaired ring still fails its orientation check."""


class WrongWindingDirection(FIRParsingError):
    fatal = False

    def __init__(self, icao: str):
        self.icao = icao
        super().__init__(f"{icao}: boundary is wound clockwise (hole) instead of as a polygon")


class DuplicatePoints(FIRParsingError):
    fatal = False

    def __init__(self, icao: str, points: Sequence[Any]):
        self.icao = icao
        self.points = list(points)
        rendered = ", ".join(str(p) for p in self.points)
        super().__init__(f"{icao}: boundary contains duplicate points: {rendered}")


class BoundingBoxField(NamedTuple):
    """One mismatching bounding box value."""

    declared: Decimal
    computed: Decimal
    field: str

    def __str__(self) -> str:
        return f"{self.field} declared {self.declared}, computed {self.computed}"


class BoundingBoxMismatch(FIRParsingError):
    fatal = False

    def __init__(self, icao: str, mismatches: Sequence[BoundingBoxField]):
        self.icao = icao
        self.mismatches = list(mismatches)
        details = "; ".join(str(m) for m in self.mismatches)
        super().__init__(f"{icao}: bounding box mismatch: {details}")


class DuplicateBaseFIR(FIRParsingError):
    """The same (icao, is_oceanic) base record is defined more than once."""

    def __init__(self, duplicates: Sequence[Tuple[str, bool, int]]):
        self.duplicates = list(duplicates)
        details = ", ".join(
            f"{icao}{' (oceanic)' if is_oceanic else ''} x{count}"
            for icao, is_oceanic, count in self.duplicates
        )
        super().__init__(f"duplicate base FIR definitions: {details}")


class ExtensionNotAdjacent(FIRParsingError):
    fatal = False

    def __init__(self, icaos: Sequence[str]):
        self.icaos = list(icaos)
        super().__init__(
            f"extensions not directly following their base FIR: {', '.join(self.icaos)}"
        )


class OrphanExtension(FIRParsingError):
    """An extension record references a base FIR that does not exist."""

    def __init__(self, icao: str):
        self.icao = icao
        super().__init__(f"extension {icao} has no base FIR")


class CollectedErrors(FIRParsingError):
    """Failed pass carrying every recoverable error that was found."""

    def __init__(self, errors: List[FIRParsingError]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} errors found")

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)
