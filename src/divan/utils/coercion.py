"""src/divan/utils/coercion.py

Conversions between textual, byte, symbolic and numeric forms of a value.
"""

import re
from typing import Any, Union

from divan.exceptions import CoercionError

__all__ = [
    "Symbol",
    "format_value",
    "to_text",
    "to_bytes",
    "to_integer",
    "to_symbol",
]

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class Symbol(str):
    """
    Symbolic name, such as a bare view option flag.

    A Symbol compares equal to the plain string of the same name, but
    ``isinstance(value, Symbol)`` tells a flag apart from ordinary text.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


def format_value(value: Any) -> str:
    """Debug representation of any value."""
    return repr(value)


def to_text(value: Any) -> str:
    """
    Convert a value to text.

    Args:
        value: Text, symbol, bytes or any other value.

    Returns:
        Plain ``str``. Bytes are decoded as UTF-8; bytes that are not valid
        UTF-8 and every other shape fall back to ``format_value``.
    """
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return format_value(bytes(value))
    return format_value(value)


def to_bytes(value: Any) -> bytes:
    """
    Convert a value to bytes.

    Text and symbols are encoded as UTF-8, anything else goes through
    ``format_value`` first.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    return format_value(value).encode("utf-8")


def to_integer(value: Union[int, str, bytes]) -> int:
    """
    Convert a value to an integer.

    Raises:
        CoercionError: If the value is not an int, text or bytes.
        ValueError: If text or bytes do not hold an integer literal.
    """
    if isinstance(value, bool) or isinstance(value, Symbol):
        raise CoercionError(f"Cannot convert {value!r} to an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="replace")
    if isinstance(value, str):
        if not _INTEGER_LITERAL.fullmatch(value):
            raise ValueError(f"Invalid integer literal: {value!r}")
        return int(value)
    raise CoercionError(f"Cannot convert {value!r} to an integer")


def to_symbol(value: Union[Symbol, str, bytes]) -> Symbol:
    """
    Convert text or bytes to a Symbol.

    Raises:
        CoercionError: If the value is not text, bytes or a Symbol.
    """
    if isinstance(value, Symbol):
        return value
    if isinstance(value, str):
        return Symbol(value)
    if isinstance(value, bytes):
        try:
            return Symbol(value.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise CoercionError(f"Cannot convert {value!r} to a symbol") from exc
    raise CoercionError(f"Cannot convert {value!r} to a symbol")
