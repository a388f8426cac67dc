"""
Scalar-type descriptor.

A ScalarType describes one numeric kind: how many bytes a value takes,
which numpy dtype stores it, and the four binary operations the matrix
engine is allowed to use. Matrix code never touches native arithmetic on
elements directly; it asks the matrix's descriptor instead, so a single
code path serves every kind.

Concrete kinds live in polymatrix.scalars.kinds. Instances are immutable
and compare structurally (same name and size), never by identity.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from polymatrix.core.compute.tolerances import select_pivot_tolerance


class ScalarType:
    """
    Arithmetic table for one scalar kind.

    Subclasses implement div, magnitude, coerce, parse and format; add,
    sub and mul are shared because numpy scalars of the storage dtype
    already behave correctly for them.

    Attributes:
        name: Display name ('int', 'float')
        dtype: numpy storage dtype
        is_integral: True for integer kinds (truncating division)
    """

    is_integral: bool = False

    def __init__(self, name: str, dtype: np.dtype | type):
        self._name = name
        self._dtype = np.dtype(dtype)

    # === Identity ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def size(self) -> int:
        """Byte size of one scalar."""
        return self._dtype.itemsize

    @property
    def zero(self) -> Any:
        """Additive identity."""
        return self._dtype.type(0)

    @property
    def one(self) -> Any:
        """Multiplicative identity."""
        return self._dtype.type(1)

    @property
    def pivot_tolerance(self) -> float:
        """Default threshold below which a pivot counts as zero."""
        return select_pivot_tolerance(self).threshold

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarType):
            return NotImplemented
        return self.size == other.size and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.name, self.size))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, size={self.size})"

    # === Arithmetic ===

    def add(self, x: Any, y: Any) -> Any:
        return self._dtype.type(x + y)

    def sub(self, x: Any, y: Any) -> Any:
        return self._dtype.type(x - y)

    def mul(self, x: Any, y: Any) -> Any:
        return self._dtype.type(x * y)

    def div(self, x: Any, y: Any) -> Any:
        """
        Divide x by y.

        Raises:
            DivisionByZeroError: If y is exactly zero
        """
        raise NotImplementedError

    # === Pivoting ===

    def magnitude(self, x: Any) -> Any:
        """Absolute value, used to rank pivot candidates."""
        raise NotImplementedError

    def is_negligible(self, x: Any, tolerance: float | None = None) -> bool:
        """
        True if x is too small to serve as a pivot.

        Args:
            x: Candidate pivot
            tolerance: Override for the kind's default pivot tolerance
        """
        raise NotImplementedError

    # === Conversion ===

    def coerce(self, value: Any) -> Any:
        """
        Convert a caller value to the storage dtype.

        Raises:
            NullArgumentError: If value is None
            TypeMismatchError: If value cannot be represented by this kind
        """
        raise NotImplementedError

    def parse(self, text: str) -> Any:
        """
        Parse one scalar from text.

        Raises:
            ValidationError: If text is not a valid literal for this kind
        """
        raise NotImplementedError

    def format(self, value: Any) -> str:
        """Format one scalar as text."""
        raise NotImplementedError
