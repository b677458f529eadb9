"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{name}\n" for name in solve(numbers)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())