"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosim.parse import ArgumentError, parse_arguments
from philosim.table import end_simulation, init_table

USAGE = "Try : philosim [ nb_philo ] [ die ] [ eat ] [ sleep ] ([ max_meals ])"


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the arguments, run the simulation and return an exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        parse_arguments(args)
    except ArgumentError as error:
        print(error)
        print(USAGE)
        return 1
    table = init_table(args, sys.stdout)
    end_simulation(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())