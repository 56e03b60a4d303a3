"""String helpers with C-library semantics: parsing, splitting, trimming, searching.

Searches return an index into the given string, or None when there is no match.
Character arguments may be an integer code or a one-character string.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .chars import isdigit

CharLike = Union[int, str]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _is_space(ch: str) -> bool:
    return ch == " " or 9 <= ord(ch) <= 13


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        while c > 256:
            c -= 256
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; no digits gives 0. The result wraps
    to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and _is_space(text[pos]):
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    total = 0
    for ch in text[pos:]:
        if not isdigit(ch):
            break
        total = _wrap_int32(total * 10 + ord(ch) - ord("0"))
    return _wrap_int32(-total) if negative else total


def itoa(n: int) -> str:
    """Return the decimal representation of a signed 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not text or not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle matches at 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: Union[str, bytes], s2: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    The end of a string, or an embedded NUL, compares as code 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    codes1 = list(s1) if isinstance(s1, bytes) else [ord(ch) for ch in s1]
    codes2 = list(s2) if isinstance(s2, bytes) else [ord(ch) for ch in s2]
    for idx in range(n):
        c1 = codes1[idx] if idx < len(codes1) else 0
        c2 = codes2[idx] if idx < len(codes2) else 0
        if c1 != c2:
            return c1 - c2
        if c1 == 0:
            return 0
    return 0


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``; a NUL character finds the end."""
    text = _until_nul(text)
    code = _char_code(c)
    if code == 0:
        return len(text)
    return next((idx for idx, ch in enumerate(text) if ord(ch) == code), None)


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``; a NUL character finds the end."""
    text = _until_nul(text)
    code = _char_code(c)
    if code == 0:
        return len(text)
    for idx in range(len(text) - 1, -1, -1):
        if ord(text[idx]) == code:
            return idx
    return None