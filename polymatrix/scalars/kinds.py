"""
Built-in scalar kinds: signed 64-bit integer and IEEE-754 single precision.
"""

from __future__ import annotations

import numbers
from typing import Any
import numpy as np

from polymatrix.core.exceptions import (
    DivisionByZeroError,
    NullArgumentError,
    TypeMismatchError,
    ValidationError,
)
from polymatrix.scalars.base import ScalarType


def _require_value(value: Any, kind: str) -> None:
    if value is None:
        raise NullArgumentError(f"value: expected a {kind} scalar, got None")


class IntegerType(ScalarType):
    """
    Signed integer kind.

    Division truncates toward zero, matching fixed-width integer hardware,
    not Python's floor division.
    """

    is_integral = True

    def __init__(self):
        super().__init__('int', np.int64)

    def div(self, x: Any, y: Any) -> np.int64:
        if y == 0:
            raise DivisionByZeroError(
                f"int: division of {int(x)} by zero",
                scalar_type=self.name,
                dividend=int(x),
            )
        quotient = abs(int(x)) // abs(int(y))
        if (x < 0) != (y < 0):
            quotient = -quotient
        return np.int64(quotient)

    def magnitude(self, x: Any) -> np.int64:
        return np.int64(abs(int(x)))

    def is_negligible(self, x: Any, tolerance: float | None = None) -> bool:
        threshold = self.pivot_tolerance if tolerance is None else tolerance
        return abs(int(x)) <= threshold

    def coerce(self, value: Any) -> np.int64:
        _require_value(value, self.name)
        if isinstance(value, numbers.Integral):
            integral = int(value)
        elif isinstance(value, numbers.Real) and float(value).is_integer():
            integral = int(value)
        else:
            raise TypeMismatchError(
                f"value: cannot store {value!r} ({type(value).__name__}) "
                f"in an {self.name} matrix"
            )
        info = np.iinfo(self.dtype)
        if not info.min <= integral <= info.max:
            raise TypeMismatchError(
                f"value: {integral} out of range for {self.name} "
                f"[{info.min}, {info.max}]"
            )
        return np.int64(integral)

    def parse(self, text: str) -> np.int64:
        try:
            return self.coerce(int(text.strip()))
        except ValueError as e:
            raise ValidationError(f"cannot parse {text!r} as {self.name}: {e}") from e

    def format(self, value: Any) -> str:
        return str(int(value))


class Float32Type(ScalarType):
    """Single-precision floating point kind."""

    def __init__(self):
        super().__init__('float', np.float32)

    def div(self, x: Any, y: Any) -> np.float32:
        if y == 0:
            raise DivisionByZeroError(
                f"float: division of {float(x)} by zero",
                scalar_type=self.name,
                dividend=float(x),
            )
        return np.float32(np.float32(x) / np.float32(y))

    def magnitude(self, x: Any) -> np.float32:
        return np.float32(abs(x))

    def is_negligible(self, x: Any, tolerance: float | None = None) -> bool:
        threshold = self.pivot_tolerance if tolerance is None else tolerance
        return x == 0 or float(abs(x)) < threshold

    def coerce(self, value: Any) -> np.float32:
        _require_value(value, self.name)
        if not isinstance(value, numbers.Real):
            raise TypeMismatchError(
                f"value: cannot store {value!r} ({type(value).__name__}) "
                f"in a {self.name} matrix"
            )
        return np.float32(float(value))

    def parse(self, text: str) -> np.float32:
        try:
            return np.float32(float(text.strip()))
        except ValueError as e:
            raise ValidationError(f"cannot parse {text!r} as {self.name}: {e}") from e

    def format(self, value: Any) -> str:
        return f"{float(value):.2f}"
