"""
Tests for the plain-text matrix format.
"""

import io

import pytest

from polymatrix.core.exceptions import (
    InvalidSizeError,
    NullArgumentError,
    ValidationError,
)
from polymatrix.matrix import Matrix, format_matrix, print_matrix, read_matrix
from polymatrix.scalars import FLOAT32, INTEGER


# ═══════════════════════════════════════════════════════════════════════
# Output
# ═══════════════════════════════════════════════════════════════════════


class TestFormat:

    def test_named_integer_matrix(self, int_pair):
        a, _ = int_pair
        assert format_matrix(a, "A") == "A = [[1 2]\n [3 4]]"

    def test_unnamed(self, int_pair):
        a, _ = int_pair
        assert format_matrix(a) == "[[1 2]\n [3 4]]"

    def test_float_two_decimals(self):
        m = Matrix.from_rows([[1.0, 2.5, -0.125]], FLOAT32)
        assert format_matrix(m) == "[[1.00 2.50 -0.12]]"

    def test_column_vector(self):
        m = Matrix.from_rows([[7], [11], [9]], INTEGER)
        assert format_matrix(m, "b") == "b = [[7]\n [11]\n [9]]"

    def test_released(self, int_pair):
        a, _ = int_pair
        a.release()
        with pytest.raises(NullArgumentError):
            format_matrix(a)


class TestPrint:

    def test_writes_to_stream(self, int_pair):
        a, _ = int_pair
        out = io.StringIO()
        print_matrix(a, "A", stream=out)
        assert out.getvalue() == "A = [[1 2]\n [3 4]]\n"

    def test_defaults_to_stdout(self, int_pair, capsys):
        a, _ = int_pair
        print_matrix(a)
        assert capsys.readouterr().out == "[[1 2]\n [3 4]]\n"


# ═══════════════════════════════════════════════════════════════════════
# Input
# ═══════════════════════════════════════════════════════════════════════


class TestRead:

    def test_integer_from_string(self):
        m = read_matrix("2 3\n1 2 3\n4 5 6\n", INTEGER)
        assert m.scalar_type is INTEGER
        assert m.to_list() == [[1, 2, 3], [4, 5, 6]]

    def test_float_from_stream(self):
        m = read_matrix(io.StringIO("2 2\n0.5 -1.25\n3 4e-1"), FLOAT32)
        assert m.shape == (2, 2)
        assert m.to_list()[0] == [0.5, -1.25]
        assert m.get(1, 1) == FLOAT32.coerce(0.4)

    def test_layout_insensitive(self):
        m = read_matrix("  2\n2 1   2\n\n3\t4  ", INTEGER)
        assert m.to_list() == [[1, 2], [3, 4]]

    def test_extra_tokens_ignored(self):
        m = read_matrix("1 1 5 6 7", INTEGER)
        assert m.to_list() == [[5]]

    def test_reads_back_formatted_values(self, rng):
        values = rng.integers(-50, 50, size=(3, 4))
        original = Matrix.from_rows(values.tolist(), INTEGER)
        text = "3 4\n" + " ".join(
            INTEGER.format(v) for row in original.to_list() for v in row
        )
        assert read_matrix(text, INTEGER).to_list() == original.to_list()

    @pytest.mark.parametrize("text", ["", "2", "two 2", "2 x", "0 2", "2 -1"])
    def test_bad_header(self, text):
        with pytest.raises(InvalidSizeError):
            read_matrix(text, INTEGER)

    def test_missing_elements(self):
        with pytest.raises(ValidationError, match="expected 4 elements for a 2x2 matrix, got 3"):
            read_matrix("2 2 1 2 3", INTEGER)

    def test_malformed_element(self):
        with pytest.raises(ValidationError, match="cannot parse"):
            read_matrix("1 2 1 x", FLOAT32)

    def test_float_token_in_integer_matrix(self):
        with pytest.raises(ValidationError):
            read_matrix("1 2 1 1.5", INTEGER)

    def test_missing_source(self):
        with pytest.raises(NullArgumentError):
            read_matrix(None, INTEGER)

    def test_missing_scalar_type(self):
        with pytest.raises(NullArgumentError):
            read_matrix("1 1 1", None)
