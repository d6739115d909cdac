#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Okabe–Ito colors (color-blind friendly)
COLORS = {"BFS": "#0072B2", "DFS": "#E69F00"}
METRICS = ("moves", "expanded", "time_sec")


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def load(paths) -> pd.DataFrame:
    """Concatenate runner CSVs, keeping only finished runs."""
    dfs = [pd.read_csv(p) for p in paths]
    df = pd.concat(dfs, ignore_index=True) if dfs else pd.DataFrame(columns=["algorithm", "depth"])
    if "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    return df.reset_index(drop=True)


def summarize(df: pd.DataFrame, metrics=METRICS) -> pd.DataFrame:
    """Mean and standard error of each metric per (algorithm, depth)."""
    present = [m for m in metrics if m in df.columns]
    g = df.groupby(["algorithm", "depth"])[present]
    out = g.agg(["mean", sem, "count"])
    out.columns = [f"{m}_{stat}" for m, stat in out.columns]
    return out.reset_index()


def plot_metric(ax, summary: pd.DataFrame, metric: str):
    for algo, part in summary.groupby("algorithm"):
        part = part.sort_values("depth")
        ax.errorbar(part["depth"], part[f"{metric}_mean"], yerr=part[f"{metric}_sem"],
                    marker="o", capsize=3, label=algo, color=COLORS.get(algo))
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± SEM)")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No finished runs to plot. Are your CSVs empty?")
        sys.exit(0)

    summary = summarize(df)
    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    for metric in METRICS:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, summary, metric)
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        if not args.show:
            plt.close(fig)

    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
