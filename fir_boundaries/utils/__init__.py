"""
Geometry helpers for the fir_boundaries library.
"""

from .ordered_set import OrderedSet
from .orientation import Fill, polygon_or_hole, shoelace_sum
from .bounding_box import BoundingBox, compute_bounding_box, apply_antimeridian_rule

__all__ = [
    'OrderedSet',
    'Fill',
    'polygon_or_hole',
    'shoelace_sum',
    'BoundingBox',
    'compute_bounding_box',
    'apply_antimeridian_rule',
]
