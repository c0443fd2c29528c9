"""
FIR (Flight Information Region) boundary processing library.

This package reads airspace boundary files in the native line format,
validates or repairs them, and converts them to and from GeoJSON.

The main public API includes:
- GeoPoint, FIRBoundary, FIRCollection: Core data models
- read_records / read_file: Parse pass over native format lines
- Mode: Strict (report problems) or Fix (repair them)
- FormatConverter: Native records <-> GeoJSON FeatureCollection
- load_document / save_document: File extension based loading and saving
"""

from .errors import FIRParsingError, CollectedErrors
from .models import GeoPoint, FIRBoundary, FIRCollection
from .engines import Mode
from .parsers import read_records, read_file, write_lines, write_file
from .converters import FormatConverter, load_records, dump_geojson
from .documents import NativeRecords, GeoJsonDocument, load_document, save_document

__version__ = '0.1.0'
__all__ = [
    'FIRParsingError',
    'CollectedErrors',
    'GeoPoint',
    'FIRBoundary',
    'FIRCollection',
    'Mode',
    'read_records',
    'read_file',
    'write_lines',
    'write_file',
    'FormatConverter',
    'load_records',
    'dump_geojson',
    'NativeRecords',
    'GeoJsonDocument',
    'load_document',
    'save_document',
]
