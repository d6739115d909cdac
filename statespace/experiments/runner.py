from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from statespace.domains.tile_puzzle import TilePuzzleProblem, flip_parity
from statespace.search.engine import SEARCHERS

State = Tuple[int, ...]

HEADER = [
    "algorithm", "n", "depth", "seed",
    "expanded", "generated", "peak_frontier", "moves", "time_sec",
    "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    problem: TilePuzzleProblem


def _gen(n: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            p = TilePuzzleProblem.scramble(d, seed, n=n)
            if p.is_solvable(p.start):
                out.append(Instance(seed=seed, depth=d, problem=p))
                made += 1
            seed += 1
            attempts += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def run(n: int, depths: List[int], per_depth: int, algos: List[str], out: Path,
        include_unsolvable: bool = False) -> int:
    """Run every algorithm on every instance and write one CSV row per run. Returns the instance count."""
    insts = _gen(n, depths, per_depth)
    out.parent.mkdir(parents=True, exist_ok=True)

    def write_row(w, res, inst: Instance, solvable_flag: int):
        row = res.as_row()
        w.writerow([
            row["algorithm"], n, inst.depth, inst.seed,
            row["expanded"], row["generated"], row["peak_frontier"], row["moves"],
            f"{row['time']:.6f}", row["termination"], solvable_flag,
        ])

    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for algo in algos:
                write_row(w, SEARCHERS[algo](inst.problem).solve(), inst, 1)
            # parity-flipped copy; the search exhausts the reachable half of the space
            if include_unsolvable:
                u = TilePuzzleProblem(flip_parity(inst.problem.start))
                for algo in algos:
                    write_row(w, SEARCHERS[algo](u).solve(), inst, 0)
    return len(insts)


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="BFS/DFS sliding-tile puzzle experiment runner")
    ap.add_argument("--algo", choices=["bfs", "dfs", "both"], default="both")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (slow beyond 2x2)")
    ap.add_argument("--out", type=Path, default=Path("results/bfs_dfs.csv"))
    args = ap.parse_args(argv)

    algos = ["bfs", "dfs"] if args.algo == "both" else [args.algo]
    count = run(args.n, args.depths, args.per_depth, algos, args.out, args.include_unsolvable)
    print(f"Wrote {args.out} ({count} instances)")


if __name__ == "__main__":
    main()
