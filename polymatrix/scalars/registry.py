"""
Scalar kind registry.

Exactly one descriptor exists per kind. Both are built when this module
is imported, so lookups never construct anything and are safe from any
thread.
"""

from __future__ import annotations

from enum import Enum

from polymatrix.core.exceptions import NullArgumentError, ValidationError
from polymatrix.scalars.base import ScalarType
from polymatrix.scalars.kinds import Float32Type, IntegerType


class ScalarKind(str, Enum):
    """Well-known scalar kinds."""
    INTEGER = 'int'
    FLOAT32 = 'float'


INTEGER = IntegerType()
FLOAT32 = Float32Type()

_DESCRIPTORS: dict[ScalarKind, ScalarType] = {
    ScalarKind.INTEGER: INTEGER,
    ScalarKind.FLOAT32: FLOAT32,
}

_ALIASES: dict[str, ScalarKind] = {
    'int': ScalarKind.INTEGER,
    'integer': ScalarKind.INTEGER,
    'float': ScalarKind.FLOAT32,
    'float32': ScalarKind.FLOAT32,
}


def get_descriptor(kind: ScalarKind | str) -> ScalarType:
    """
    Return the process-wide descriptor for a scalar kind.

    Args:
        kind: A ScalarKind member or one of 'int', 'integer', 'float',
              'float32' (case-insensitive)

    Returns:
        The shared ScalarType instance for that kind

    Raises:
        NullArgumentError: If kind is None
        ValidationError: If kind is not a known scalar kind
    """
    if kind is None:
        raise NullArgumentError("kind: expected a scalar kind, got None")
    if isinstance(kind, ScalarKind):
        return _DESCRIPTORS[kind]
    if isinstance(kind, str) and kind.lower() in _ALIASES:
        return _DESCRIPTORS[_ALIASES[kind.lower()]]
    raise ValidationError(
        f"kind: unknown scalar kind {kind!r}, expected one of {sorted(_ALIASES)}"
    )


def types_equal(a: ScalarType | None, b: ScalarType | None) -> bool:
    """
    Structural equality of two descriptors: same size and same name.

    Instance identity is irrelevant. A missing descriptor is never equal
    to anything.
    """
    if a is None or b is None:
        return False
    return a.size == b.size and a.name == b.name
