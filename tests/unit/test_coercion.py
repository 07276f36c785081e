"""Unit tests for divan.utils.coercion module."""

import pytest

from divan.exceptions import CoercionError
from divan.utils.coercion import (
    Symbol,
    format_value,
    to_bytes,
    to_integer,
    to_symbol,
    to_text,
)


class TestSymbol:
    """Tests for Symbol class."""

    def test_equals_plain_string(self):
        """Test that a Symbol compares equal to the same text."""
        assert Symbol("descending") == "descending"
        assert isinstance(Symbol("descending"), str)

    def test_repr(self):
        """Test that repr marks the value as a symbol."""
        assert repr(Symbol("foo")) == "Symbol('foo')"


class TestToText:
    """Tests for to_text()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("text", "text"),
            (b"bytes", "bytes"),
            (bytearray(b"array"), "array"),
            (Symbol("flag"), "flag"),
            (42, "42"),
            (1.5, "1.5"),
            (None, "None"),
            ([1, "a"], "[1, 'a']"),
            ("café".encode("utf-8"), "café"),
        ],
    )
    def test_conversions(self, value, expected):
        """Test conversion of each supported shape."""
        assert to_text(value) == expected

    def test_symbol_becomes_plain_str(self):
        """Test that symbols come back as plain str."""
        assert type(to_text(Symbol("flag"))) is str

    def test_invalid_utf8_falls_back_to_repr(self):
        """Test that undecodable bytes use the debug representation."""
        assert to_text(b"\xff") == format_value(b"\xff")

    @pytest.mark.parametrize(
        "value", ["x", b"x", Symbol("x"), 7, 2.5, None, (1, 2), b"\xfe"]
    )
    def test_idempotent(self, value):
        """Test that converting twice equals converting once."""
        assert to_text(to_text(value)) == to_text(value)


class TestToBytes:
    """Tests for to_bytes()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (b"raw", b"raw"),
            (bytearray(b"raw"), b"raw"),
            ("text", b"text"),
            ("café", b"caf\xc3\xa9"),
            (Symbol("flag"), b"flag"),
            (12, b"12"),
            ({"a": 1}, b"{'a': 1}"),
        ],
    )
    def test_conversions(self, value, expected):
        """Test conversion of each supported shape."""
        assert to_bytes(value) == expected


class TestToInteger:
    """Tests for to_integer()."""

    @pytest.mark.parametrize(
        "value, expected", [(5, 5), ("42", 42), (b"-7", -7), ("+3", 3), ("007", 7)]
    )
    def test_conversions(self, value, expected):
        """Test conversion of ints, text and bytes."""
        assert to_integer(value) == expected

    @pytest.mark.parametrize("value", [1.5, None, [1], True, Symbol("1")])
    def test_unsupported_shape_raises(self, value):
        """Test that unsupported shapes raise CoercionError."""
        with pytest.raises(CoercionError):
            to_integer(value)

    def test_unsupported_shape_is_type_error(self):
        """Test that CoercionError is caught as TypeError."""
        with pytest.raises(TypeError):
            to_integer(object())

    @pytest.mark.parametrize(
        "value", ["twelve", " 3 ", "1_000", "\u0663", "", "-", "1.0", b"\xff1", b" 4"]
    )
    def test_malformed_number_raises(self, value):
        """Test that only plain ASCII integer literals are accepted."""
        with pytest.raises(ValueError):
            to_integer(value)


class TestToSymbol:
    """Tests for to_symbol()."""

    def test_symbol_unchanged(self):
        """Test that a Symbol is returned as is."""
        flag = Symbol("flag")
        assert to_symbol(flag) is flag

    @pytest.mark.parametrize("value", ["flag", b"flag"])
    def test_text_and_bytes(self, value):
        """Test conversion of text and bytes."""
        result = to_symbol(value)
        assert isinstance(result, Symbol)
        assert result == "flag"

    @pytest.mark.parametrize("value", [1, 2.0, None, ("a",)])
    def test_unsupported_shape_raises(self, value):
        """Test that unsupported shapes raise CoercionError."""
        with pytest.raises(CoercionError):
            to_symbol(value)

    def test_undecodable_bytes_raise(self):
        """Test that bytes that are not UTF-8 raise CoercionError."""
        with pytest.raises(CoercionError):
            to_symbol(b"\xff")
