"""
Plain-text matrix format.

Output layout, one bracketed group per row:

    A = [[1 2 3]
     [4 5 6]]

Input layout is whitespace separated: the row and column counts, then
rows * cols elements in row-major order. Element text is produced and
consumed by the matrix's ScalarType, so integers print as plain decimals
and floats with two fraction digits.
"""

from __future__ import annotations

import io
import sys
from typing import Iterator, TextIO

from polymatrix.core.exceptions import InvalidSizeError, ValidationError
from polymatrix.core.validation import (
    check_dimension,
    check_live,
    check_not_none,
    check_scalar_type,
)
from polymatrix.matrix.dense import Matrix
from polymatrix.scalars.base import ScalarType


def format_matrix(m: Matrix, name: str | None = None) -> str:
    """
    Render m as text (without a trailing newline).

    Args:
        m: Matrix to render
        name: Optional label, rendered as 'name = ' before the matrix
    """
    check_live(m, 'm')
    kind = m.scalar_type
    grid = m._grid()
    rows = (
        "[" + " ".join(kind.format(value) for value in row) + "]"
        for row in grid
    )
    body = "[" + "\n ".join(rows) + "]"
    if name is not None:
        return f"{name} = {body}"
    return body


def print_matrix(m: Matrix, name: str | None = None, stream: TextIO | None = None) -> None:
    """Write format_matrix(m, name) and a newline to stream (stdout by default)."""
    text = format_matrix(m, name)
    out = sys.stdout if stream is None else stream
    out.write(text + "\n")


def _tokens(source: TextIO) -> Iterator[str]:
    for line in source:
        yield from line.split()


def read_matrix(source: TextIO | str, scalar_type: ScalarType) -> Matrix:
    """
    Parse a matrix from a text stream or string.

    Args:
        source: Stream (or literal text) holding 'rows cols e00 e01 ...'
        scalar_type: Kind of the matrix to build

    Returns:
        A new matrix owned by the caller

    Raises:
        NullArgumentError: If source or scalar_type is None
        InvalidSizeError: If the header is missing, malformed or not positive
        ValidationError: If an element is missing or malformed
    """
    check_scalar_type(scalar_type, 'scalar_type')
    check_not_none(source, 'source')
    if isinstance(source, str):
        source = io.StringIO(source)

    tokens = _tokens(source)
    dims = []
    for label in ('rows', 'cols'):
        token = next(tokens, None)
        if token is None:
            raise InvalidSizeError(f"{label}: missing from matrix header")
        try:
            value = int(token)
        except ValueError as e:
            raise InvalidSizeError(f"{label}: expected an integer, got {token!r}") from e
        dims.append(check_dimension(value, label))
    rows, cols = dims

    values = []
    for i in range(rows * cols):
        token = next(tokens, None)
        if token is None:
            raise ValidationError(
                f"expected {rows * cols} elements for a {rows}x{cols} matrix, got {i}"
            )
        values.append(scalar_type.parse(token))

    m = Matrix.create(rows, cols, scalar_type)
    m._storage()[:] = values
    return m
