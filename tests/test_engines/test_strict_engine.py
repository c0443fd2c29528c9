"""Tests for Strict mode validation."""

import copy

import pytest
from decimal import Decimal

from fir_boundaries.engines import EngineFactory, Mode, ValidationEngine, misplaced_extensions
from fir_boundaries.errors import (
    BoundingBoxMismatch, CollectedErrors, DegenerateRing, DuplicateBaseFIR, DuplicatePoints,
    ExtensionNotAdjacent, WrongWindingDirection,
)
from fir_boundaries.models.fir_collection import FIRCollection
from fir_boundaries.models.geo_point import GeoPoint
from fir_boundaries.models.validation import ErrorCollector
from fir_boundaries.parsers.dat_parser import read_records

from conftest import make_boundary, record_lines, SQUARE


class TestRecordChecks:
    """Per-record checks."""

    def test_clean_record(self):
        collector = ErrorCollector()
        ValidationEngine().check_record(make_boundary('AAAA', SQUARE), collector)
        assert collector.is_valid

    def test_wrong_winding(self):
        collector = ErrorCollector()
        ValidationEngine().check_record(make_boundary('AAAA', list(reversed(SQUARE))), collector)
        assert len(collector.errors) == 1
        assert isinstance(collector.errors[0], WrongWindingDirection)
        assert collector.errors[0].icao == 'AAAA'

    def test_duplicate_points(self):
        collector = ErrorCollector()
        record = make_boundary('AAAA', [(0, 0), (1, 0), (1, 0), (1, 1), (0, 1)])
        ValidationEngine().check_record(record, collector)
        assert len(collector.errors) == 1
        error = collector.errors[0]
        assert isinstance(error, DuplicatePoints)
        assert error.points == [GeoPoint(Decimal(1), Decimal(0))]
        assert len(record.boundary_corners) == 5

    def test_bounding_box_mismatch_lists_only_wrong_fields(self):
        collector = ErrorCollector()
        record = make_boundary('AAAA', SQUARE, bbox=(0, 0, 2, 1.5))
        ValidationEngine().check_record(record, collector)
        error = collector.errors[0]
        assert isinstance(error, BoundingBoxMismatch)
        assert [(m.field, m.declared, m.computed) for m in error.mismatches] == [
            ('max_lat', Decimal(2), Decimal(1)),
            ('max_lon', Decimal('1.5'), Decimal(1)),
        ]

    def test_bounding_box_uses_antimeridian_rule(self):
        collector = ErrorCollector()
        ring = [(-40, -170), (-30, -170), (-30, 170), (-40, 170)]
        ValidationEngine().check_record(make_boundary('NZZO', ring, bbox=(-40, -170, -30, 170)), collector)
        error = collector.errors[0]
        assert [m.field for m in error.mismatches] == ['min_lon', 'max_lon']
        assert error.mismatches[0].computed == Decimal(170)

    def test_all_problems_of_a_record_are_reported(self):
        collector = ErrorCollector()
        record = make_boundary('AAAA', [(0, 1), (1, 1), (1, 1), (1, 0), (0, 0)], bbox=(0, 0, 1, 2))
        ValidationEngine().check_record(record, collector)
        assert [type(e) for e in collector.errors] == [WrongWindingDirection, DuplicatePoints, BoundingBoxMismatch]

    def test_degenerate_ring_is_fatal(self):
        with pytest.raises(DegenerateRing):
            ValidationEngine().check_record(make_boundary('AAAA', [(0, 0), (1, 1), (2, 2)]), ErrorCollector())

    def test_never_mutates(self):
        record = make_boundary('AAAA', [(0, 1), (1, 1), (1, 1), (1, 0), (0, 0)], bbox=(5, 5, 6, 6))
        before = copy.deepcopy(record)
        ValidationEngine().check_record(record, ErrorCollector())
        assert record == before


class TestCollectionChecks:
    """Checks that need every record."""

    def test_duplicate_base_is_fatal(self):
        lines = record_lines('AAAA', SQUARE) + record_lines('AAAA', SQUARE)
        with pytest.raises(DuplicateBaseFIR) as excinfo:
            read_records(lines, Mode.STRICT)
        assert excinfo.value.duplicates == [('AAAA', False, 2)]
        assert 'AAAA x2' in str(excinfo.value)

    def test_duplicate_base_hides_recoverable_errors(self):
        lines = (
            record_lines('BBBB', list(reversed(SQUARE)))
            + record_lines('AAAA', SQUARE)
            + record_lines('AAAA', SQUARE)
        )
        with pytest.raises(DuplicateBaseFIR):
            read_records(lines, Mode.STRICT)

    def test_same_icao_different_oceanic_flag(self):
        lines = record_lines('AAAA', SQUARE) + record_lines('AAAA', SQUARE, is_oceanic=True)
        assert len(read_records(lines, Mode.STRICT)) == 2

    def test_adjacent_extensions(self):
        collection = FIRCollection([
            make_boundary('AAAA', SQUARE, sequence_id=0),
            make_boundary('AAAA', SQUARE, sequence_id=1, is_extension=True),
            make_boundary('AAAA', SQUARE, sequence_id=2, is_extension=True),
            make_boundary('BBBB', SQUARE, sequence_id=3),
        ])
        assert misplaced_extensions(collection) == []

    def test_extension_after_other_base(self):
        lines = (
            record_lines('AAAA', SQUARE)
            + record_lines('BBBB', SQUARE)
            + record_lines('AAAA', SQUARE, is_extension=True)
        )
        with pytest.raises(CollectedErrors) as excinfo:
            read_records(lines, Mode.STRICT)
        errors = excinfo.value.errors
        assert len(errors) == 1
        assert isinstance(errors[0], ExtensionNotAdjacent)
        assert errors[0].icaos == ['AAAA']

    def test_extension_before_its_base(self):
        collection = FIRCollection([
            make_boundary('AAAA', SQUARE, sequence_id=0, is_extension=True),
            make_boundary('AAAA', SQUARE, sequence_id=1),
        ])
        assert misplaced_extensions(collection) == ['AAAA']

    def test_every_offender_named_once(self):
        collection = FIRCollection([
            make_boundary('AAAA', SQUARE, sequence_id=0),
            make_boundary('BBBB', SQUARE, sequence_id=1),
            make_boundary('CCCC', SQUARE, sequence_id=2),
            make_boundary('AAAA', SQUARE, sequence_id=3, is_extension=True),
            make_boundary('AAAA', SQUARE, sequence_id=4, is_extension=True),
            make_boundary('BBBB', SQUARE, sequence_id=5, is_extension=True),
        ])
        assert misplaced_extensions(collection) == ['AAAA', 'BBBB']

    def test_errors_across_records_reported_together(self, sample_lines):
        lines = (
            record_lines('AAAA', list(reversed(SQUARE)))
            + record_lines('BBBB', SQUARE, bbox=(0, 0, 1, 3))
            + sample_lines
        )
        with pytest.raises(CollectedErrors) as excinfo:
            read_records(lines, Mode.STRICT)
        assert [type(e) for e in excinfo.value.errors] == [WrongWindingDirection, BoundingBoxMismatch]
        assert len(str(excinfo.value).split('\n')) == 2


def test_factory_returns_validation_engine():
    assert isinstance(EngineFactory.get_engine('strict'), ValidationEngine)
    assert Mode.STRICT in EngineFactory.get_supported_modes()
