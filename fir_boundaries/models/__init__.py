"""
Data models for the fir_boundaries library.

This package contains the point and boundary records read from FIR
boundary files, the queryable collections built from them and the error
collector used while reading.
"""

from .geo_point import GeoPoint
from .fir_boundary import FIRBoundary
from .queryable_collection import QueryableCollection
from .fir_collection import FIRCollection
from .validation import ErrorCollector

__all__ = [
    'GeoPoint',
    'FIRBoundary',
    'QueryableCollection',
    'FIRCollection',
    'ErrorCollector',
]
