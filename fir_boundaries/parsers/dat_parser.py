"""
Parser and writer for the native FIR boundary format.

A file is a sequence of records. Each record is a header line followed by
one line per boundary point:

    ICAO|IsOceanic|IsExtension|PointCount|MinLat|MinLon|MaxLat|MaxLon|LabelLat|LabelLon
    Lat|Lon
    ...

Example:
    collection = read_records(open('FIRBoundaries.dat'), Mode.STRICT)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .base import IterableLineSource, LineSource
from ..engines import EngineFactory, Mode
from ..errors import FIRFormatError, InvalidNumberError
from ..models.fir_boundary import HEADER_FIELDS, FIRBoundary
from ..models.fir_collection import FIRCollection
from ..models.geo_point import GeoPoint, parse_decimal
from ..models.validation import ErrorCollector

logger = logging.getLogger(__name__)


class EndOfInput:
    """Marker returned once the line source has no further record."""

    def __repr__(self) -> str:
        return "END_OF_INPUT"


END_OF_INPUT = EndOfInput()


@dataclass
class ParsedRecord:
    """A structurally valid record and the recoverable problems found in it."""

    boundary: Optional[FIRBoundary]
    warnings: ErrorCollector = field(default_factory=ErrorCollector)

    @property
    def is_complete(self) -> bool:
        """False when an out-of-range point left the record without its label or a corner."""
        return self.boundary is not None and self.warnings.is_valid


def parse_flag(value: str, name: str, line_number: Optional[int] = None) -> bool:
    """
    Parse a boolean header flag, only ``"0"`` and ``"1"`` are accepted.

    Raises:
        FIRFormatError: for any other value
    """
    if value == '0':
        return False
    if value == '1':
        return True
    raise FIRFormatError(f"only supports '0' or '1' as values for {name}, found: {value!r}", line_number)


def parse_count(value: str, line_number: Optional[int] = None) -> int:
    if not (value.isascii() and value.isdigit()):
        raise InvalidNumberError('point_count', value, line_number)
    return int(value)


class RecordParser:
    """
    Reads one FIR record at a time from a line source.

    The running record counter is passed in by the caller, which increments
    it for every record returned. The parser holds no state between calls.
    """

    @classmethod
    def parse_next(cls, source: LineSource, running_count: int) -> Union[ParsedRecord, EndOfInput]:
        """
        Parse the next record.

        Args:
            source: Line source positioned on a header line
            running_count: Sequence id to give to the record

        Returns:
            ParsedRecord, or END_OF_INPUT when the source is exhausted

        Raises:
            FIRFormatError: wrong field count, bad flag or missing point lines
            InvalidNumberError: malformed numeric field
        """
        line = source.read_line()
        if line is None:
            return END_OF_INPUT
        header_line_number = source.line_number

        fields = [f.strip() for f in line.split('|')]
        if len(fields) != len(HEADER_FIELDS):
            if source.is_exhausted():
                if line.strip():
                    logger.warning(f"Ignoring incomplete trailing line {header_line_number}: {line!r}")
                return END_OF_INPUT
            raise FIRFormatError(
                f"Expected {len(HEADER_FIELDS)} fields, found: {len(fields)}, values: {fields}",
                header_line_number,
            )

        icao = fields[0]
        is_oceanic = parse_flag(fields[1], 'IsOceanic', header_line_number)
        is_extension = parse_flag(fields[2], 'IsExtension', header_line_number)
        point_count = parse_count(fields[3], header_line_number)
        min_lat, min_lon, max_lat, max_lon, label_lat, label_lon = (
            parse_decimal(value, name, header_line_number)
            for name, value in zip(HEADER_FIELDS[4:], fields[4:])
        )

        warnings = ErrorCollector()
        label = warnings.attempt(GeoPoint, label_lat, label_lon)

        corners: List[GeoPoint] = []
        for _ in range(point_count):
            point_line = source.read_line()
            if point_line is None:
                raise FIRFormatError(
                    f"{icao}: expected {point_count} points, input ended after {len(corners)}",
                    source.line_number,
                )
            point = warnings.attempt(GeoPoint.from_dat_str, point_line, source.line_number)
            if point is not None:
                corners.append(point)

        if not warnings.is_valid:
            logger.debug(f"{icao} #{running_count}: {len(warnings)} points out of range")
            return ParsedRecord(None, warnings)

        boundary = FIRBoundary(
            sequence_id=running_count,
            icao=icao,
            is_oceanic=is_oceanic,
            is_extension=is_extension,
            min_lat=min_lat,
            min_lon=min_lon,
            max_lat=max_lat,
            max_lon=max_lon,
            label=label,
            boundary_corners=corners,
        )
        return ParsedRecord(boundary, warnings)


def read_records(lines: Union[Iterable[str], LineSource], mode: Union[Mode, str] = Mode.STRICT) -> FIRCollection:
    """
    Run one parse pass over native format lines.

    Args:
        lines: Lines of the file, or a LineSource
        mode: Strict to only report problems, Fix to repair them

    Returns:
        The parsed records

    Raises:
        CollectedErrors: if recoverable errors were found
        FIRParsingError: on the first fatal error
    """
    source = lines if isinstance(lines, LineSource) else IterableLineSource(lines)
    engine = EngineFactory.get_engine(mode)
    collector = ErrorCollector()
    records: List[FIRBoundary] = []
    count = 0

    while True:
        outcome = RecordParser.parse_next(source, count)
        if outcome is END_OF_INPUT:
            break
        count += 1
        collector.extend(outcome.warnings)
        if not outcome.is_complete:
            continue
        records.append(engine.check_record(outcome.boundary, collector))

    collection = engine.finalize(FIRCollection(records), collector)
    logger.info(
        f"Read {count} records ({len(collection.bases())} bases, "
        f"{len(collection.extensions())} extensions) in {engine.mode.value} mode, "
        f"{len(collector)} errors"
    )
    return collector.result(collection)


def process_records(records: Iterable[FIRBoundary], mode: Union[Mode, str] = Mode.STRICT) -> FIRCollection:
    """
    Apply the mode checks to records that were not read from native lines.

    Raises:
        CollectedErrors: if recoverable errors were found
        FIRParsingError: on the first fatal error
    """
    engine = EngineFactory.get_engine(mode)
    collector = ErrorCollector()
    checked = [engine.check_record(record, collector) for record in records]
    collection = engine.finalize(FIRCollection(checked), collector)
    return collector.result(collection)


def read_file(path: Union[str, Path], mode: Union[Mode, str] = Mode.STRICT) -> FIRCollection:
    logger.info(f"Reading FIR boundaries from {path}")
    with open(path, encoding='utf-8') as f:
        return read_records(f, mode)


def write_lines(records: Iterable[FIRBoundary]) -> List[str]:
    """Native format lines, without terminators."""
    return FIRCollection(list(records)).to_dat_lines()


def write_file(records: Iterable[FIRBoundary], path: Union[str, Path]) -> None:
    lines = write_lines(records)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        for line in lines:
            f.write(line + '\n')
    logger.info(f"Wrote {len(lines)} lines to {path}")
