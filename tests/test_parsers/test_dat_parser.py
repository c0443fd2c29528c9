"""Tests for the native format record parser and parse pass."""

import pytest
from decimal import Decimal

from fir_boundaries.engines import Mode
from fir_boundaries.errors import (
    CollectedErrors, FIRFormatError, InvalidNumberError, PointOutOfRange, WrongWindingDirection,
)
from fir_boundaries.models.geo_point import GeoPoint
from fir_boundaries.parsers.base import IterableLineSource
from fir_boundaries.parsers.dat_parser import (
    END_OF_INPUT, RecordParser, read_file, read_records, write_file, write_lines,
)

from conftest import record_lines, SQUARE


class TestRecordParser:
    """Tests for parsing single records."""

    def test_parse_one_record(self, sample_lines):
        source = IterableLineSource(sample_lines)
        outcome = RecordParser.parse_next(source, 7)

        boundary = outcome.boundary
        assert outcome.is_complete
        assert boundary.sequence_id == 7
        assert boundary.icao == 'EGTT'
        assert boundary.is_oceanic is False
        assert boundary.is_extension is False
        assert boundary.min_lon == Decimal('-1.5')
        assert boundary.max_lat == Decimal('51.25')
        assert boundary.label == GeoPoint(Decimal('50.5'), Decimal('0.5'))
        assert len(boundary.boundary_corners) == 4
        assert source.line_number == 5

    def test_empty_source_is_end_of_input(self):
        assert RecordParser.parse_next(IterableLineSource([]), 0) is END_OF_INPUT

    def test_trailing_blank_line_is_end_of_input(self):
        source = IterableLineSource(record_lines('AAAA', SQUARE) + [''])
        assert RecordParser.parse_next(source, 0).is_complete
        assert RecordParser.parse_next(source, 1) is END_OF_INPUT

    def test_trailing_garbage_is_end_of_input(self):
        source = IterableLineSource(['AAAA|0|1'])
        assert RecordParser.parse_next(source, 0) is END_OF_INPUT

    def test_header_field_count_mismatch_is_fatal(self):
        source = IterableLineSource(['AAAA|0|0|4'] + record_lines('BBBB', SQUARE))
        with pytest.raises(FIRFormatError) as excinfo:
            RecordParser.parse_next(source, 0)
        assert 'Expected 10 fields, found: 4' in str(excinfo.value)
        assert excinfo.value.line_number == 1

    def test_blank_line_between_records_is_fatal(self):
        lines = record_lines('AAAA', SQUARE) + [''] + record_lines('BBBB', SQUARE)
        with pytest.raises(FIRFormatError):
            read_records(lines)

    @pytest.mark.parametrize('flags', ['2|0', '0|yes', 'true|0', '|0'])
    def test_invalid_flags_are_fatal(self, flags):
        header = f'AAAA|{flags}|4|0|0|1|1|0|0'
        source = IterableLineSource([header, '0|0', '1|0', '1|1', '0|1'])
        with pytest.raises(FIRFormatError) as excinfo:
            RecordParser.parse_next(source, 0)
        assert "'0' or '1'" in str(excinfo.value)

    def test_short_read_is_fatal(self):
        source = IterableLineSource(['AAAA|0|0|4|0|0|1|1|0|0', '0|0', '1|0'])
        with pytest.raises(FIRFormatError) as excinfo:
            RecordParser.parse_next(source, 0)
        assert 'expected 4 points' in str(excinfo.value)

    @pytest.mark.parametrize('count', ['four', '²', '٤', '-4', '4.0'])
    def test_bad_point_count_is_fatal(self, count):
        source = IterableLineSource([f'AAAA|0|0|{count}|0|0|1|1|0|0', '0|0'])
        with pytest.raises(InvalidNumberError) as excinfo:
            RecordParser.parse_next(source, 0)
        assert excinfo.value.field == 'point_count'

    def test_grouped_header_decimal_is_fatal(self):
        source = IterableLineSource(['AAAA|0|0|4|5_0|0|1|1|0|0', '0|0', '1|0', '1|1', '0|1'])
        with pytest.raises(InvalidNumberError) as excinfo:
            RecordParser.parse_next(source, 0)
        assert excinfo.value.field == 'min_lat'

    def test_bad_decimal_is_fatal(self):
        source = IterableLineSource(['AAAA|0|0|4|0|0|1|x|0|0', '0|0', '1|0', '1|1', '0|1'])
        with pytest.raises(InvalidNumberError) as excinfo:
            RecordParser.parse_next(source, 0)
        assert excinfo.value.field == 'max_lon'

    def test_point_line_with_three_fields_is_fatal(self):
        source = IterableLineSource(['AAAA|0|0|4|0|0|1|1|0|0', '0|0|0', '1|0', '1|1', '0|1'])
        with pytest.raises(FIRFormatError) as excinfo:
            RecordParser.parse_next(source, 0)
        assert 'expected 2 fields, got: 3' in str(excinfo.value)

    def test_out_of_range_point_is_a_warning(self):
        source = IterableLineSource(['AAAA|0|0|4|0|0|1|1|0|0', '91|0', '1|0', '1|1', '0|1'])
        outcome = RecordParser.parse_next(source, 0)
        assert not outcome.is_complete
        assert isinstance(outcome.warnings.errors[0], PointOutOfRange)
        assert source.is_exhausted()


class TestReadRecords:
    """Tests for a full parse pass."""

    def test_read_sample_strict(self, sample_lines):
        collection = read_records(sample_lines, Mode.STRICT)
        assert [f.icao for f in collection] == ['EGTT', 'EGTT', 'NZZO']
        assert [f.sequence_id for f in collection] == [0, 1, 2]
        assert [f.is_extension for f in collection] == [False, True, False]

    def test_read_file(self, sample_dat_path):
        collection = read_file(sample_dat_path, 'strict')
        nzzo = collection.for_icao('NZZO').first()
        assert nzzo.is_oceanic
        assert (nzzo.min_lon, nzzo.max_lon) == (Decimal(170), Decimal(-170))

    def test_sample_round_trip_is_identical(self, sample_lines):
        assert write_lines(read_records(sample_lines)) == sample_lines

    def test_write_file(self, sample_dat_path, tmp_path):
        output = tmp_path / 'out.dat'
        write_file(read_file(sample_dat_path), output)
        assert output.read_text() == sample_dat_path.read_text()

    def test_out_of_range_point_fails_the_pass_but_keeps_scanning(self):
        lines = (
            ['AAAA|0|0|4|0|0|1|1|0|0', '91|0', '1|0', '1|1', '0|1']
            + record_lines('BBBB', list(reversed(SQUARE)))
        )
        with pytest.raises(CollectedErrors) as excinfo:
            read_records(lines, Mode.STRICT)
        errors = excinfo.value.errors
        assert isinstance(errors[0], PointOutOfRange)
        assert isinstance(errors[1], WrongWindingDirection)
        assert errors[1].icao == 'BBBB'

    def test_out_of_range_label(self):
        lines = ['AAAA|0|0|4|0|0|1|1|0|181', '0|0', '1|0', '1|1', '0|1']
        with pytest.raises(CollectedErrors) as excinfo:
            read_records(lines)
        assert len(excinfo.value.errors) == 1

    def test_accepts_line_terminators(self, sample_dat_path):
        with open(sample_dat_path) as f:
            raw = f.readlines()
        assert len(read_records([line.replace('\n', '\r\n') for line in raw])) == 3


def test_dropped_record_keeps_its_sequence_number():
    source = IterableLineSource(
        ['AAAA|0|0|4|0|0|1|1|0|0', '91|0', '1|0', '1|1', '0|1'] + record_lines('BBBB', SQUARE)
    )
    first = RecordParser.parse_next(source, 0)
    second = RecordParser.parse_next(source, 1)
    assert first.boundary is None
    assert second.boundary.sequence_id == 1
    assert RecordParser.parse_next(source, 2) is END_OF_INPUT
