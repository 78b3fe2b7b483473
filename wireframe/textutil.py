"""Small text helpers used to read map files."""

from __future__ import annotations

_WHITESPACE = {chr(c) for c in range(9, 14)} | {" "}
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdef"
_UINT_MASK = 0xFFFFFFFF
_INT_LIMIT = 2147483648


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way the map reader expects.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. The magnitude wraps at 32 bits; a positive overflow gives -1
    and a negative one gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = (result * 10 + _DIGITS.index(text[pos])) & _UINT_MASK
        pos += 1
    if result >= _INT_LIMIT and sign == 1:
        return -1
    if result > _INT_LIMIT and sign == -1:
        return 0
    return result * sign


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def color_token(field: str) -> str | None:
    """Return the hex digits after ``,0x`` in a ``height,0xcolor`` field.

    Fields whose first character is not 1 to 8, that have nothing after the
    number, or that end before any hex digit give None.
    """
    if not field or not ("0" < field[0] < "9"):
        return None
    pos = 0
    while pos < len(field) and field[pos] in _DIGITS:
        pos += 1
    if pos == len(field):
        return None
    start = pos + 3
    if start >= len(field):
        return None
    return field[start:]


def parse_hex(text: str) -> int:
    """Parse lowercase hex digits into a signed 32-bit value.

    Any character that is not a lowercase hex digit counts as 16.
    """
    value = 0
    for char in text:
        index = _HEX_DIGITS.find(char)
        digit = 16 if index < 0 else index
        value = (value * 16 + digit) & _UINT_MASK
    if value >= _INT_LIMIT:
        value -= 1 << 32
    return value


def prefix_matches(expected: str, given: str, count: int) -> bool:
    """Tell whether the first ``count`` characters of both strings agree.

    Both strings are treated as padded with NUL characters.
    """
    left = expected[:count].ljust(count, "\0")
    right = given[:count].ljust(count, "\0")
    return left == right