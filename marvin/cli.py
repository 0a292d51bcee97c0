"""Command line entry: print routes through a map for several weights."""

import sys
from typing import Optional, Sequence

from marvin.grid import load_grid
from marvin.search import solve

WEIGHTS = range(5, 0, -1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one line of moves per heuristic weight, from 5 down to 1."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: marvin <map file>")
        return 1
    try:
        grid = load_grid(args[0])
    except (OSError, ValueError) as exc:
        print(f"marvin: {exc}", file=sys.stderr)
        return 1
    for weight in WEIGHTS:
        moves = solve(grid, weight)
        if moves is not None:
            print(moves)
    return 0


if __name__ == "__main__":
    sys.exit(main())