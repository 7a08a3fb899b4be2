"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from .parsing import InputError, parse_args
from .sorting import is_sorted, sort
from .stacks import PushSwap


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers in ``argv`` and write each move to standard output."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    if len(args) == 1 and args[0] == "":
        return _error()
    try:
        values = parse_args(args)
    except InputError:
        return _error()
    machine = PushSwap(values, out=sys.stdout)
    if not is_sorted(machine.a):
        sort(machine)
    return 0


if __name__ == "__main__":
    sys.exit(main())