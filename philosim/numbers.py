"""Lenient integer parsing for command-line values."""

from __future__ import annotations


def atol(text: str) -> int:
    """Parse a leading signed decimal integer from ``text``.

    An optional ``+`` or ``-`` may come first. Parsing stops at the first
    character that is not a digit. If no digit follows the optional sign,
    the result is ``0``.
    """
    sign = 1
    rest = text
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)

    if not digits:
        return 0
    return sign * int("".join(digits))