"""Character classification and case conversion limited to the ASCII range.

Every function accepts either a one-character string or an integer code
point. Predicates return a bool; the case converters return a value of the
same kind as the one they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACES = frozenset(map(ord, " \n\t\v\f\r"))
_SIGNS = frozenset(map(ord, "+-"))


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string or an integer."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return _is_digit(_code(c))


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    code = _code(c)
    return _is_digit(code) or _is_upper(code) or _is_lower(code)


def is_space(c: CharLike) -> bool:
    """True for space, newline, tab, vertical tab, form feed and carriage return."""
    return _code(c) in _SPACES


def is_sign(c: CharLike) -> bool:
    """True for '+' and '-'."""
    return _code(c) in _SIGNS


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    return _convert(c, code + 32 if _is_upper(code) else code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    return _convert(c, code - 32 if _is_lower(code) else code)