"""A small printf-style formatter supporting the c, s, p, d, i, u, x, X and % conversions.

Flags ``-``, ``0``, ``+``, ``#`` and space are recognised, along with a
field width and a precision. Anything else after a ``%`` is a
:class:`FormatError`.
"""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple

from .strutil import atoi

_FLAG_CHARS = "+-0# "
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a malformed directive or missing arguments.

    ``partial`` holds the text produced before the faulty directive.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


@dataclass
class _Flags:
    plus: bool = False
    minus: bool = False
    zero: bool = False
    sharp: bool = False
    blank: bool = False
    precision: bool = False


def _digit_count(n: int) -> int:
    return 0 if n == 0 else len(str(abs(n)))


def _to_int32(value: Any) -> int:
    n = operator.index(value) & _UINT32_MASK
    return n - 2**32 if n > 2**31 - 1 else n


def _parse_flags(fmt: str, pos: int) -> Tuple[_Flags, int]:
    flags = _Flags()
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        ch = fmt[pos]
        if ch == "+":
            flags.plus = True
        elif ch == "-":
            flags.minus = True
        elif ch == "0":
            flags.zero = True
        elif ch == "#":
            flags.sharp = True
        else:
            flags.blank = True
        pos += 1
    return flags, pos


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(flags: _Flags, precision: int, value: Optional[str]) -> str:
    if value is None:
        if flags.precision and precision < 6:
            return ""
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    if flags.precision and precision < len(value):
        return value[:precision]
    return value


def _number(flags: _Flags, precision: int, value: Any, signed: bool) -> Tuple[str, str]:
    n = _to_int32(value)
    if flags.precision:
        flags.zero = False
    if flags.plus:
        flags.blank = False
    if signed and n >= 0 and flags.blank:
        flags.blank = False
        flags.plus = True
        sign = " "
    elif signed and n < 0:
        sign = "-"
    else:
        sign = "+"
    if n == 0:
        digits = "0"
    elif signed:
        digits = str(abs(n))
    else:
        digits = str(n & _UINT32_MASK)
    if n == 0 and flags.precision and precision == 0:
        return "", sign
    return digits.rjust(precision, "0"), sign


def _hex(flags: _Flags, precision: int, n: int, lowercase: bool) -> str:
    if flags.precision:
        flags.zero = False
    digits = format(n, "x" if lowercase else "X")
    if n == 0 and flags.precision and precision == 0:
        return ""
    padded = digits.rjust(precision, "0")
    if flags.sharp and n != 0:
        return ("0x" if lowercase else "0X") + padded
    return padded


def _address(flags: _Flags, precision: int, value: Any) -> str:
    if value is None or operator.index(value) == 0:
        if flags.precision and precision < 5:
            return ""
        return "(nil)"
    return "0x" + _hex(flags, precision, operator.index(value) & _UINT64_MASK, True)


def _render_directive(
    fmt: str, pos: int, next_arg: Callable[[], Any]
) -> Tuple[str, int]:
    """Render the directive starting just past a '%'; return text and next position."""
    if pos >= len(fmt):
        raise FormatError("format string ends with a lone '%'")
    flags, pos = _parse_flags(fmt, pos)
    width = atoi(fmt[pos:])
    pos += _digit_count(width)
    if fmt.startswith(".", pos):
        pos += 1
        flags.precision = True
    precision = atoi(fmt[pos:])
    if fmt.startswith("0", pos):
        pos += 1
    pos += _digit_count(precision)
    specifier = fmt[pos] if pos < len(fmt) else ""

    sign = ""
    if specifier == "%":
        flags = _Flags()
        width = precision = 0
        body = "%"
    else:
        if width < 0 or precision < 0:
            raise FormatError("field width or precision out of range")
        if specifier == "c":
            body = _char(next_arg())
        elif specifier == "s":
            body = _string(flags, precision, next_arg())
        elif specifier in ("d", "i", "u"):
            body, sign = _number(flags, precision, next_arg(), specifier != "u")
        elif specifier == "p":
            body = _address(flags, precision, next_arg())
        elif specifier in ("x", "X"):
            value = operator.index(next_arg()) & _UINT32_MASK
            body = _hex(flags, precision, value, specifier == "x")
        elif specifier:
            raise FormatError(f"unsupported conversion {specifier!r}")
        else:
            raise FormatError("directive has no conversion character")

    show_sign = (sign == "-" or flags.plus) and specifier in ("d", "i")
    if flags.zero and flags.minus:
        flags.zero = False

    sign_text = sign if show_sign else ""
    padding = max(0, width - len(body) - len(sign_text))
    if flags.minus:
        text = sign_text + body + " " * padding
    elif flags.zero:
        text = sign_text + "0" * padding + body
    else:
        text = " " * padding + sign_text + body
    return text, pos + 1


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its directives replaced by the formatted ``args``.

    Formatting stops at an embedded NUL. Surplus arguments are ignored.
    """
    fmt = fmt.split("\0", 1)[0]
    remaining: Iterator[Any] = iter(args)

    def next_arg() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise FormatError("not enough arguments for format string") from None

    pieces = []
    pos = 0
    while pos < len(fmt):
        index = fmt.find("%", pos)
        if index < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:index])
        try:
            text, pos = _render_directive(fmt, index + 1, next_arg)
        except FormatError as exc:
            exc.partial = "".join(pieces)
            raise
        pieces.append(text)
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    On a :class:`FormatError` the text produced so far is written before
    the error propagates.
    """
    try:
        text = format_printf(fmt, *args)
    except FormatError as exc:
        sys.stdout.write(exc.partial)
        sys.stdout.flush()
        raise
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)