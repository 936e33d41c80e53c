"""Conversion between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_INT_BITS = 32


def _to_int32(value: int) -> int:
    span = 1 << _INT_BITS
    half = span >> 1
    return (value + half) % span - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. The value saturates at the 64-bit range and
    is then narrowed to a 32-bit signed integer. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)

    value = sign * int("".join(digits)) if digits else 0
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    return _to_int32(value)


def itoa(number: int) -> str:
    """Render an integer as decimal text, with a leading '-' when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(number)