"""Validation of the simulation's command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence

from philosim.numbers import atol

_INT_MAX = 2147483647
_MIN_ARGS = 4
_MAX_ARGS = 5


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Check the arguments (program name excluded) and return their values.

    Four or five arguments are expected. Each must read as an integer from
    0 to 2147483647; a value that reads as zero must be exactly ``"0"``.
    """
    if len(args) < _MIN_ARGS:
        raise ArgumentError("Error: Too few arguments.")
    if len(args) > _MAX_ARGS:
        raise ArgumentError("Error: Too much arguments.")

    values = []
    for arg in args:
        number = atol(arg)
        if number > _INT_MAX or number < 0 or (number == 0 and arg != "0"):
            raise ArgumentError("Argument(s) not valid.")
        values.append(number)
    return values