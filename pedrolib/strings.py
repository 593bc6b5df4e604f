"""String helpers with the semantics of the classic C string routines.

Strings are ordinary Python ``str`` objects. Where the C routines hand back a
pointer into a string, these functions return an index, or None when there is
no match. Functions that accept a missing string (None) in C accept None here
and give the same "nothing" result.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Normalise a one-character string or an integer to a one-character string.

    Integers are reduced to their low byte, as the C routines do.
    """
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _require(s: Optional[str], name: str) -> str:
    if s is None:
        raise TypeError(f"{name} must be a string, not None")
    return s


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(_require(s, "s"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the terminator, at index len(s).
    """
    s = _require(s, "s")
    ch = _char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the terminator, at index len(s).
    """
    s = _require(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    a = s1 if limit is None else s1[:limit]
    b = s2 if limit is None else s2[:limit]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if limit is not None and min(len(a), len(b)) >= limit:
        return 0
    # One string ended; its terminator compares as code point 0.
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strcmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Compare two strings character by character.

    Returns the difference of the first pair of differing code points, 0 when
    equal, and -1 when either argument is None.
    """
    if s1 is None or s2 is None:
        return -1
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first n characters of two strings."""
    s1 = _require(s1, "s1")
    s2 = _require(s2, "s2")
    if n < 0:
        raise ValueError(f"negative length: {n}")
    if n == 0:
        return 0
    return _compare(s1, s2, n)


def strnstr(haystack: Optional[str], needle: Optional[str], length: int) -> Optional[int]:
    """Index of needle within the first length characters of haystack, or None.

    An empty needle matches at index 0. With a missing argument and a length
    of 0 the result is None.
    """
    if length < 0:
        raise ValueError(f"negative length: {length}")
    if (haystack is None or needle is None) and length == 0:
        return None
    haystack = _require(haystack, "haystack")
    needle = _require(needle, "needle")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: Optional[str]) -> Optional[str]:
    """A copy of s, or None when s is None."""
    if s is None:
        return None
    return str(s)


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """s1 followed by s2, or None when either is None."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strjoin_equal(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """s1, an equals sign and s2, as in NAME=VALUE; None when either is None."""
    if s1 is None or s2 is None:
        return None
    return f"{s1}={s2}"


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most length characters of s starting at start.

    A start beyond the end of s gives an empty string; None gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """s without the leading and trailing characters found in charset.

    Returns None when either argument is None.
    """
    if s is None or charset is None:
        return None
    return s.strip(charset) if charset else s


def split(s: Optional[str], sep: CharLike) -> Optional[List[str]]:
    """The non-empty pieces of s between occurrences of sep.

    Returns None when s is None.
    """
    if s is None:
        return None
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """A new string built from f(index, char) for every character of s."""
    if s is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call f(index, char) for every item of chars, in place.

    A value returned by f replaces the character at that index; None leaves
    it unchanged. Nothing happens when chars or f is None.
    """
    if chars is None or f is None:
        return
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement