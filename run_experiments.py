#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run(f"{sys.executable} -m statespace.experiments.runner --n 2 --depths 2 4 6 --per_depth 10 --include_unsolvable --out results/p3_bfs_dfs.csv")
    run(f"{sys.executable} -m statespace.experiments.runner --n 3 --depths 4 8 12 16 --per_depth 10 --out results/p8_bfs_dfs.csv")
    run(f"{sys.executable} -m statespace.experiments.plot results/p3_bfs_dfs.csv results/p8_bfs_dfs.csv --save results/plots")

if __name__ == "__main__":
    main()
