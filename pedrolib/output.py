"""Formatted output with a small printf subset, and writers for text streams.

The format language knows the conversions ``%c``, ``%s``, ``%d``, ``%i``,
``%u``, ``%x``, ``%X``, ``%p`` and ``%%``, with no flags, widths or
precisions. Any other character after ``%`` is written as it is.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO, Union

CharLike = Union[str, int]

_INT_BITS = 32
_POINTER_BITS = 64


def _signed(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return spec
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for format conversion %{spec}") from None
    if spec == "c":
        return _char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    number = operator.index(arg)
    if spec in "di":
        return str(_signed(number, _INT_BITS))
    if spec == "u":
        return str(_unsigned(number, _INT_BITS))
    if spec == "x":
        return f"{_unsigned(number, _INT_BITS):x}"
    if spec == "X":
        return f"{_unsigned(number, _INT_BITS):X}"
    address = _unsigned(number, _POINTER_BITS)
    return "(nil)" if address == 0 else f"0x{address:x}"


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments.

    Raises TypeError when fmt is None or an argument is missing, and
    ValueError when fmt ends with a lone '%'.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the characters written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character to stream (standard output by default)."""
    _target(stream).write(_char(c))


def putstr_fd(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s to stream; nothing is written when s is None."""
    if s is None:
        return
    _target(stream).write(s)


def putendl_fd(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s and a newline to stream; nothing is written when s is None."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def putnbr_fd(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of n, wrapped to a 32-bit integer, to stream."""
    _target(stream).write(str(_signed(operator.index(n), _INT_BITS)))