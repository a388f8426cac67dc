"""
Matrix arithmetic.

Every operation validates all of its preconditions before allocating the
result, and never mutates its inputs. Element arithmetic goes through the
operands' ScalarType (add/sub/mul), never through native numpy
vectorization, so integer and float matrices share one code path and
integer results keep their fixed-width semantics.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Sequence

from polymatrix.core.exceptions import DimensionError, TypeMismatchError
from polymatrix.core.validation import (
    check_index,
    check_length,
    check_live,
    check_not_none,
    check_same_shape,
    check_same_type,
    check_scalar_type,
)
from polymatrix.matrix.dense import Matrix
from polymatrix.scalars.base import ScalarType
from polymatrix.scalars.registry import types_equal


def _elementwise(a: Matrix, b: Matrix, op_name: str) -> Matrix:
    check_live(a, 'a')
    check_live(b, 'b')
    check_same_type(a, b, names=('a', 'b'))
    check_same_shape(a, b, names=('a', 'b'))

    op = getattr(a.scalar_type, op_name)
    result = Matrix.create(a.rows, a.cols, a.scalar_type)
    src_a, src_b, out = a._storage(), b._storage(), result._storage()
    for i in range(out.size):
        out[i] = op(src_a[i], src_b[i])
    return result


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum a + b.

    Raises:
        NullArgumentError: If either operand is missing or released
        TypeMismatchError: If the scalar types differ
        DimensionError: If the shapes differ
    """
    return _elementwise(a, b, 'add')


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """Elementwise difference a - b. Same contract as add()."""
    return _elementwise(a, b, 'sub')


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a x b.

    result[i][j] = sum over k of a[i][k] * b[k][j], accumulated from the
    kind's zero through its mul and add.

    Raises:
        NullArgumentError: If either operand is missing or released
        TypeMismatchError: If the scalar types differ
        DimensionError: If a.cols != b.rows
    """
    check_live(a, 'a')
    check_live(b, 'b')
    check_same_type(a, b, names=('a', 'b'))
    if a.cols != b.rows:
        raise DimensionError(
            f"Cannot multiply {a.shape} by {b.shape}: a.cols={a.cols} != b.rows={b.rows}"
        )

    kind = a.scalar_type
    result = Matrix.create(a.rows, b.cols, kind)
    A, B, C = a._grid(), b._grid(), result._grid()
    for i in range(a.rows):
        for j in range(b.cols):
            acc = kind.zero
            for k in range(a.cols):
                acc = kind.add(acc, kind.mul(A[i, k], B[k, j]))
            C[i, j] = acc
    return result


def scalar_multiply(m: Matrix, scalar: Any) -> Matrix:
    """
    Multiply every element of m by scalar.

    Raises:
        NullArgumentError: If m is missing/released or scalar is None
        TypeMismatchError: If scalar cannot be stored in m's kind
    """
    check_live(m, 'm')
    check_not_none(scalar, 'scalar')
    kind = m.scalar_type
    factor = kind.coerce(scalar)

    result = m.clone()
    data = result._storage()
    for i in range(data.size):
        data[i] = kind.mul(data[i], factor)
    return result


def add_linear_combination(m: Matrix, row_idx: int, alphas: Sequence[Any]) -> Matrix:
    """
    Add a weighted sum of the other rows to row row_idx.

    For every column j:
        result[row_idx][j] = m[row_idx][j] + sum_{k != row_idx} alphas[k] * m[k][j]

    alphas has one coefficient per row. The coefficient at row_idx does
    not take part; callers conventionally pass zero there, and a non-zero
    value triggers a UserWarning.

    Raises:
        NullArgumentError: If m is missing/released or alphas is None
        InvalidIndexError: If row_idx >= m.rows
        DimensionError: If len(alphas) != m.rows
        TypeMismatchError: If a coefficient cannot be stored in m's kind
    """
    check_live(m, 'm')
    row_idx = check_index(row_idx, m.rows, 'row_idx', m.shape)
    check_length(alphas, m.rows, 'alphas')
    kind = m.scalar_type
    coefficients = [kind.coerce(alpha) for alpha in alphas]

    if coefficients[row_idx] != kind.zero:
        warnings.warn(
            f"alphas[{row_idx}] = {kind.format(coefficients[row_idx])} is ignored: "
            f"row {row_idx} is the target of the combination",
            UserWarning,
            stacklevel=2,
        )

    result = m.clone()
    source, target = m._grid(), result._grid()
    for j in range(m.cols):
        acc = kind.zero
        for k in range(m.rows):
            if k == row_idx:
                continue
            acc = kind.add(acc, kind.mul(coefficients[k], source[k, j]))
        target[row_idx, j] = kind.add(target[row_idx, j], acc)
    return result


def _round_half_away(value: Any) -> int:
    x = float(value)
    if not math.isfinite(x):
        raise TypeMismatchError(f"value: cannot convert non-finite {x} to an integer")
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def convert(m: Matrix, scalar_type: ScalarType) -> Matrix:
    """
    Copy m into a matrix of another scalar kind.

    Float to integer rounds half away from zero. Converting to the same
    kind is a clone.

    Raises:
        NullArgumentError: If m is missing/released or scalar_type is None
        TypeMismatchError: If a value does not fit the target kind
    """
    check_live(m, 'm')
    check_scalar_type(scalar_type, 'scalar_type')
    if types_equal(m.scalar_type, scalar_type):
        return m.clone()

    source = m._storage()
    if scalar_type.is_integral and not m.scalar_type.is_integral:
        values = [scalar_type.coerce(_round_half_away(v)) for v in source]
    else:
        values = [scalar_type.coerce(v) for v in source]

    result = Matrix.create(m.rows, m.cols, scalar_type)
    result._storage()[:] = values
    return result
