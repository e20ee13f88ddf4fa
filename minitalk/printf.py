"""A small printf: parses conversion specifications and renders them."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any

from minitalk.conversions import (
    FormatFlags,
    format_char,
    format_hex,
    format_int,
    format_percent,
    format_pointer,
    format_str,
    format_unsigned,
)

_TYPES = frozenset("cspdiuxX%")
_FLAGS = frozenset("-0.*")


def _isdigit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _take_int(args: Iterator[Any]) -> int:
    value = _take(args)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"an integer is required, got {type(value).__name__}") from None


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    try:
        return chr(operator.index(value) & 0xFF)
    except TypeError:
        raise TypeError(f"%c requires an int or a character, got {type(value).__name__}") from None


def _parse_precision(fmt: str, i: int, flags: FormatFlags, args: Iterator[Any]) -> int:
    if i < len(fmt) and fmt[i] == "*":
        value = _take_int(args)
        flags.precision = value if value >= 0 else None
        return i + 1
    precision = 0
    while i < len(fmt) and _isdigit(fmt[i]):
        precision = precision * 10 + int(fmt[i])
        i += 1
    flags.precision = precision
    return i


def _star_width(flags: FormatFlags, args: Iterator[Any]) -> None:
    flags.star = True
    width = _take_int(args)
    if width < 0:
        flags.minus = True
        flags.zero = False
        width = -width
    flags.width = width


def _parse_spec(fmt: str, i: int, flags: FormatFlags, args: Iterator[Any]) -> int:
    """Fill ``flags`` from the specification starting at ``i``; return where it stopped."""
    n = len(fmt)
    while i < n:
        ch = fmt[i]
        if not (_isdigit(ch) or ch in _TYPES or ch in _FLAGS):
            break
        if ch == "0" and flags.width == 0 and not flags.minus:
            flags.zero = True
        if ch == ".":
            i = _parse_precision(fmt, i + 1, flags, args)
            if i >= n:
                break
            ch = fmt[i]
        if ch == "-":
            flags.minus = True
            flags.zero = False
        if ch == "*":
            _star_width(flags, args)
        if _isdigit(ch):
            if flags.star:
                flags.width = 0
            flags.width = flags.width * 10 + int(ch)
        if ch in _TYPES:
            return i
        i += 1
    return i


def _render(conversion: str, flags: FormatFlags, args: Iterator[Any]) -> str:
    if conversion == "c":
        return format_char(_as_char(_take(args)), flags)
    if conversion == "s":
        value = _take(args)
        if value is not None and not isinstance(value, str):
            raise TypeError(f"%s requires a str or None, got {type(value).__name__}")
        return format_str(value, flags)
    if conversion == "p":
        value = _take(args)
        return format_pointer(0 if value is None else operator.index(value), flags)
    if conversion in ("d", "i"):
        return format_int(_take_int(args), flags)
    if conversion == "u":
        return format_unsigned(_take_int(args), flags)
    if conversion == "x":
        return format_hex(_take_int(args), False, flags)
    if conversion == "X":
        return format_hex(_take_int(args), True, flags)
    return format_percent(flags)


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    out: list[str] = []
    arguments = iter(args)
    n = len(fmt)
    i = 0
    while i < n:
        ch = fmt[i]
        if ch == "%" and i + 1 < n:
            flags = FormatFlags()
            i = _parse_spec(fmt, i + 1, flags, arguments)
            if i < n:
                if fmt[i] in _TYPES:
                    out.append(_render(fmt[i], flags, arguments))
                else:
                    out.append(fmt[i])
        elif ch != "%":
            out.append(ch)
        i += 1
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)