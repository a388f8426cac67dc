"""
Scalar-type descriptors.

Public API:
    get_descriptor(kind) -> ScalarType
    types_equal(a, b) -> bool

Example:
    >>> from polymatrix.scalars import get_descriptor
    >>> f32 = get_descriptor('float')
    >>> f32.format(f32.div(f32.coerce(7), f32.coerce(2)))
    '3.50'
"""

from polymatrix.scalars.base import ScalarType
from polymatrix.scalars.kinds import IntegerType, Float32Type
from polymatrix.scalars.registry import (
    ScalarKind,
    INTEGER,
    FLOAT32,
    get_descriptor,
    types_equal,
)

__all__ = [
    "ScalarType",
    "IntegerType",
    "Float32Type",
    "ScalarKind",
    "INTEGER",
    "FLOAT32",
    "get_descriptor",
    "types_equal",
]
