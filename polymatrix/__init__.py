"""
polymatrix: dense matrices over interchangeable scalar types.

Matrix code is written once against a ScalarType descriptor and runs
unchanged over signed integers and single-precision floats.

Submodules:
    scalars: Scalar-type descriptors (int, float)
    matrix: Dense storage, arithmetic and text I/O
    gauss: Square linear systems by Gauss elimination
"""

__version__ = "0.1.0"

from polymatrix.core.exceptions import ErrorCode, error_message
from polymatrix.scalars import (
    ScalarKind,
    ScalarType,
    INTEGER,
    FLOAT32,
    get_descriptor,
    types_equal,
)
from polymatrix.matrix import (
    Matrix,
    add,
    subtract,
    multiply,
    scalar_multiply,
    add_linear_combination,
    convert,
    format_matrix,
    print_matrix,
    read_matrix,
)
from polymatrix.gauss import solve, LinearSystem

__all__ = [
    "__version__",
    "ErrorCode",
    "error_message",
    "ScalarKind",
    "ScalarType",
    "INTEGER",
    "FLOAT32",
    "get_descriptor",
    "types_equal",
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
    "solve",
    "LinearSystem",
]
