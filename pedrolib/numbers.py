"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

_LEADING_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse(text: str, bits: int) -> int:
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap(value, bits)


def atoi(text: str) -> int:
    """Parse an optional sign followed by ASCII digits into a 32-bit integer.

    Leading whitespace is not skipped; parsing stops at the first non-digit and
    an input with no digits gives 0. Values outside the 32-bit range wrap around.
    """
    return _parse(text, 32)


def atol(text: str) -> int:
    """Like atoi, but the result wraps to a 64-bit integer."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return f"{n:d}"