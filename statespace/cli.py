#!/usr/bin/env python3
import argparse, sys
from typing import List, Optional

from statespace.domains.tile_puzzle import TilePuzzleProblem
from statespace.errors import StateSpaceError
from statespace.search.engine import SEARCHERS


def format_board(state, n: int) -> str:
    return "\n".join(" ".join(str(t) for t in state[r * n:(r + 1) * n]) for r in range(n))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve one sliding-tile puzzle and print the path.")
    ap.add_argument("tiles", type=int, nargs="+", help="Board values row by row, 0 is the blank")
    ap.add_argument("--algo", choices=sorted(SEARCHERS), default="bfs")
    ap.add_argument("--quiet", action="store_true", help="Only print the solution length")
    args = ap.parse_args(argv)

    try:
        problem = TilePuzzleProblem(args.tiles)
    except StateSpaceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    path = SEARCHERS[args.algo](problem).find_solution()
    if not path:
        print("no solution")
        return 1
    if not args.quiet:
        for state in path:
            print(format_board(state, problem.N))
            print()
    print(f"{len(path)} states in solution")
    return 0


if __name__ == "__main__":
    sys.exit(main())
