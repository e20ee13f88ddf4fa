"""Rendering of single printf conversions according to parsed flags."""

from __future__ import annotations

from dataclasses import dataclass

from minitalk.convert import itoa_base

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


@dataclass
class FormatFlags:
    """Flags of one conversion: field width, alignment, zero fill, precision."""

    width: int = 0
    minus: bool = False
    zero: bool = False
    precision: int | None = None
    star: bool = False


def pad(width: int, minimum: int, zero: bool) -> str:
    """Return the fill needed to grow ``minimum`` characters up to ``width``."""
    return ("0" if zero else " ") * max(0, width - minimum)


def _to_int32(number: int) -> int:
    number &= _UINT32
    return number - (1 << 32) if number & 0x80000000 else number


def format_char(char: str, flags: FormatFlags) -> str:
    """Render a ``%c`` conversion."""
    fill = pad(flags.width, 1, False)
    return char + fill if flags.minus else fill + char


def format_str(text: str | None, flags: FormatFlags) -> str:
    """Render a ``%s`` conversion; ``None`` prints as ``(null)``."""
    if text is None:
        text = "(null)"
    precision = flags.precision
    if precision is not None and precision > len(text):
        precision = len(text)
    if precision is not None:
        body = text[:precision]
        fill = pad(flags.width, precision, False)
    else:
        body = text
        fill = pad(flags.width, len(text), flags.zero)
    return body + fill if flags.minus else fill + body


def format_pointer(address: int, flags: FormatFlags) -> str:
    """Render a ``%p`` conversion."""
    address &= _UINT64
    if address == 0 and flags.precision == 0:
        fill = pad(flags.width - 2, 0, False)
        return "0x" + fill if flags.minus else fill + "0x"
    digits = itoa_base(address, 16).lower()
    precision = flags.precision
    if precision is not None and precision < len(digits):
        precision = len(digits)
    body = "0x" + pad(precision or 0, len(digits), True) + digits
    fill = pad(flags.width, len(digits) + 2, False)
    return body + fill if flags.minus else fill + body


def _digits_with_precision(digits: str, precision: int | None) -> str:
    if precision is None:
        return digits
    return pad(precision, len(digits), True) + digits


def _format_digits(digits: str, flags: FormatFlags) -> str:
    """Lay out an unsigned digit string with precision and width."""
    out = []
    if flags.minus:
        out.append(_digits_with_precision(digits, flags.precision))
    precision = flags.precision
    if precision is not None and precision < len(digits):
        precision = len(digits)
    if precision is not None:
        out.append(pad(flags.width - precision, 0, False))
    else:
        out.append(pad(flags.width, len(digits), flags.zero))
    if not flags.minus:
        out.append(_digits_with_precision(digits, flags.precision))
    return "".join(out)


def format_int(number: int, flags: FormatFlags) -> str:
    """Render a ``%d`` or ``%i`` conversion of a 32-bit signed integer."""
    number = _to_int32(number)
    original = number
    precision = flags.precision
    if precision == 0 and number == 0:
        return pad(flags.width, 0, False)

    out = []
    width = flags.width
    zero = flags.zero
    if number < 0 and (precision is not None or zero):
        if zero and precision is None:
            out.append("-")
        number = -number
        zero = True
        width -= 1
    digits = str(number)

    def body() -> str:
        sign = "-" if original < 0 and precision is not None else ""
        return sign + _digits_with_precision(digits, precision)

    if flags.minus:
        out.append(body())
    effective = precision
    if effective is not None and effective < len(digits):
        effective = len(digits)
    if effective is not None:
        out.append(pad(width - effective, 0, False))
    else:
        out.append(pad(width, len(digits), zero))
    if not flags.minus:
        out.append(body())
    return "".join(out)


def format_unsigned(number: int, flags: FormatFlags) -> str:
    """Render a ``%u`` conversion of a 32-bit unsigned integer."""
    number &= _UINT32
    if flags.precision == 0 and number == 0:
        return pad(flags.width, 0, False)
    return _format_digits(str(number), flags)


def format_hex(number: int, upper: bool, flags: FormatFlags) -> str:
    """Render a ``%x`` (or ``%X`` when ``upper``) conversion of a 32-bit value."""
    number &= _UINT32
    if flags.precision == 0 and number == 0:
        return pad(flags.width, 0, False)
    digits = itoa_base(number, 16)
    if not upper:
        digits = digits.lower()
    return _format_digits(digits, flags)


def format_percent(flags: FormatFlags) -> str:
    """Render a ``%%`` conversion."""
    fill = pad(flags.width, 1, flags.zero)
    return "%" + fill if flags.minus else fill + "%"