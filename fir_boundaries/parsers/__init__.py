from .base import LineSource, IterableLineSource
from .dat_parser import (
    RecordParser,
    ParsedRecord,
    EndOfInput,
    END_OF_INPUT,
    read_records,
    process_records,
    read_file,
    write_lines,
    write_file,
)

__all__ = [
    'LineSource',
    'IterableLineSource',
    'RecordParser',
    'ParsedRecord',
    'EndOfInput',
    'END_OF_INPUT',
    'read_records',
    'process_records',
    'read_file',
    'write_lines',
    'write_file',
]
