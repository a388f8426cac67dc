"""
Tests for the polymatrix exception hierarchy and status codes.

Validates:
    - Inheritance chain (all exceptions catchable via PolyMatrixError)
    - Builtin compatibility (IndexError, MemoryError, ZeroDivisionError)
    - Every concrete exception maps to one ErrorCode
    - error_message() text for each code, including unknown codes
    - Diagnostic attributes and their None defaults
"""

import pytest

from polymatrix.core.exceptions import (
    AllocationError,
    DimensionError,
    DivisionByZeroError,
    ErrorCode,
    InvalidIndexError,
    InvalidSizeError,
    NullArgumentError,
    NumericalError,
    PolyMatrixError,
    SingularMatrixError,
    TypeMismatchError,
    ValidationError,
    error_message,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PolyMatrixError."""

    @pytest.mark.parametrize("exc_type", [
        NullArgumentError,
        InvalidSizeError,
        TypeMismatchError,
        DimensionError,
        InvalidIndexError,
    ])
    def test_input_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad input")

    @pytest.mark.parametrize("exc_type", [
        SingularMatrixError,
        DivisionByZeroError,
    ])
    def test_numeric_errors_are_numerical_errors(self, exc_type):
        with pytest.raises(NumericalError):
            raise exc_type("numeric failure")

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        NumericalError,
        AllocationError,
        SingularMatrixError,
        DivisionByZeroError,
        InvalidIndexError,
    ])
    def test_everything_is_polymatrix_error(self, exc_type):
        with pytest.raises(PolyMatrixError):
            raise exc_type("failure")

    def test_invalid_index_is_index_error(self):
        with pytest.raises(IndexError):
            raise InvalidIndexError("out of range")

    def test_allocation_error_is_memory_error(self):
        with pytest.raises(MemoryError):
            raise AllocationError("too big")

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            raise DivisionByZeroError("x / 0")

    def test_allocation_error_is_not_validation_error(self):
        assert not isinstance(AllocationError("too big"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Status codes
# ═══════════════════════════════════════════════════════════════════════


class TestErrorCodes:
    """Each concrete exception carries exactly one stable code."""

    @pytest.mark.parametrize("exc_type, code", [
        (NullArgumentError, ErrorCode.NULL_POINTER),
        (AllocationError, ErrorCode.OUT_OF_MEMORY),
        (InvalidSizeError, ErrorCode.INVALID_SIZE),
        (TypeMismatchError, ErrorCode.TYPE_MISMATCH),
        (DimensionError, ErrorCode.DIMENSION_MISMATCH),
        (InvalidIndexError, ErrorCode.INVALID_INDEX),
        (SingularMatrixError, ErrorCode.SINGULAR_MATRIX),
        (DivisionByZeroError, ErrorCode.DIVISION_BY_ZERO),
    ])
    def test_code_attribute(self, exc_type, code):
        assert exc_type("x").code is code

    def test_abstract_bases_have_no_code(self):
        assert PolyMatrixError.code is None
        assert ValidationError.code is None
        assert NumericalError.code is None

    def test_code_values_are_distinct(self):
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    def test_ok_is_zero_and_failures_negative(self):
        assert ErrorCode.OK == 0
        assert all(code < 0 for code in ErrorCode if code is not ErrorCode.OK)


class TestErrorMessage:
    """error_message() maps every code to a human-readable string."""

    @pytest.mark.parametrize("code, message", [
        (ErrorCode.OK, "Success"),
        (ErrorCode.NULL_POINTER, "Missing argument or released matrix"),
        (ErrorCode.OUT_OF_MEMORY, "Memory allocation failed"),
        (ErrorCode.INVALID_SIZE, "Invalid matrix size"),
        (ErrorCode.TYPE_MISMATCH, "Scalar type mismatch"),
        (ErrorCode.DIMENSION_MISMATCH, "Dimension mismatch"),
        (ErrorCode.INVALID_INDEX, "Index out of range"),
        (ErrorCode.SINGULAR_MATRIX, "Singular matrix"),
        (ErrorCode.DIVISION_BY_ZERO, "Division by zero"),
    ])
    def test_known_codes(self, code, message):
        assert error_message(code) == message

    def test_accepts_plain_int(self):
        assert error_message(-7) == "Singular matrix"

    @pytest.mark.parametrize("code", [1, -9, 42])
    def test_unknown_code(self, code):
        assert error_message(code) == "Unknown error"

    def test_every_code_has_a_message(self):
        for code in ErrorCode:
            assert error_message(code) != "Unknown error"


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries pivot diagnostics."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            pivot_column=1,
            pivot_magnitude=0.0,
            tolerance=1e-10,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.pivot_column == 1
        assert err.pivot_magnitude == 0.0
        assert err.tolerance == 1e-10

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_column is None
        assert err.pivot_magnitude is None
        assert err.tolerance is None


class TestOtherAttributes:

    def test_invalid_index_attributes(self):
        err = InvalidIndexError("row out of range", index=5, shape=(3, 3))
        assert err.index == 5
        assert err.shape == (3, 3)

    def test_invalid_index_defaults(self):
        err = InvalidIndexError("row out of range")
        assert err.index is None
        assert err.shape is None

    def test_allocation_shape(self):
        err = AllocationError("too big", shape=(10, 20))
        assert err.shape == (10, 20)

    def test_division_by_zero_attributes(self):
        err = DivisionByZeroError("int: 7 / 0", scalar_type="int", dividend=7)
        assert err.scalar_type == "int"
        assert err.dividend == 7

    def test_division_by_zero_defaults(self):
        err = DivisionByZeroError("x / 0")
        assert err.scalar_type is None
        assert err.dividend is None
