"""
Dense matrix engine.

Public API:
    Matrix.create(rows, cols, scalar_type) -> Matrix
    add, subtract, multiply, scalar_multiply, add_linear_combination, convert
    format_matrix, print_matrix, read_matrix

Example:
    >>> from polymatrix.matrix import Matrix, multiply
    >>> from polymatrix.scalars import INTEGER
    >>> a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]], INTEGER)
    >>> b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]], INTEGER)
    >>> multiply(a, b).to_list()
    [[58, 64], [139, 154]]
"""

from polymatrix.matrix.dense import Matrix
from polymatrix.matrix.arithmetic import (
    add,
    subtract,
    multiply,
    scalar_multiply,
    add_linear_combination,
    convert,
)
from polymatrix.matrix.textio import format_matrix, print_matrix, read_matrix

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "scalar_multiply",
    "add_linear_combination",
    "convert",
    "format_matrix",
    "print_matrix",
    "read_matrix",
]
