"""Integer parsing and base conversion helpers."""

from __future__ import annotations

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_WHITESPACE = "\t\n\v\f\r "


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring any trailing characters.

    Leading whitespace is skipped and a single optional sign is accepted.
    Text that does not start with a number yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def itoa_base(value: int, base: int) -> str:
    """Render a non-negative integer in ``base`` using upper-case digits."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))