#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
make_figs.py
------------
Reads the CSVs written by run_sweep and plots, per maze size:
  - <outdir>/sweep_reachability.png : share of mazes where E is reachable
  - <outdir>/sweep_num_paths.png     : mean number of shortest paths (log scale)

Example:
  python -m mazepaths.cli.make_figs --csv "results/csv/sweep_*.csv" --outdir results/figs
"""

from __future__ import annotations
import argparse
import glob
import os
from typing import List, Optional, Sequence

import pandas as pd
import matplotlib.pyplot as plt


def _load_many(glob_pat: str) -> Optional[pd.DataFrame]:
    paths = sorted(glob.glob(glob_pat))
    if not paths:
        print(f"[make_figs] No files for pattern: {glob_pat}")
        return None
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(p)
        dfs.append(df)
    out = pd.concat(dfs, ignore_index=True)
    print(f"[make_figs] Loaded {len(paths)} file(s) → {len(out)} rows from {glob_pat}")
    return out


def _per_size_lines(df: pd.DataFrame, value: str, ylabel: str, title: str,
                    out_path: str, logy: bool = False) -> str:
    df = df.assign(size=df["H"].astype(str) + "x" + df["W"].astype(str))
    agg = df.groupby(["size", "density"])[value].mean().reset_index()
    fig, ax = plt.subplots(figsize=(6, 4))
    for size, part in agg.groupby("size"):
        part = part.sort_values("density")
        ax.plot(part["density"], part[value], marker="o", label=size)
    if logy:
        ax.set_yscale("symlog")
    ax.set_xlabel("Obstacle density")
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.legend(title="size")
    fig.tight_layout()
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path


def make_figs(df: pd.DataFrame, outdir: str) -> List[str]:
    os.makedirs(outdir, exist_ok=True)
    saved = [
        _per_size_lines(df, "reachable", "Reachable share",
                        "Destination reachable", os.path.join(outdir, "sweep_reachability.png")),
    ]
    ok = df[df["reachable"] == 1]
    if len(ok):
        saved.append(_per_size_lines(ok, "num_paths", "Mean # shortest paths",
                                     "Shortest paths (reachable mazes)",
                                     os.path.join(outdir, "sweep_num_paths.png"), logy=True))
    return saved


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot run_sweep CSVs.")
    ap.add_argument("--csv", type=str, default="results/csv/sweep_*.csv", help="Glob of sweep CSVs")
    ap.add_argument("--outdir", type=str, default="results/figs", help="Output directory")
    args = ap.parse_args(argv)

    df = _load_many(args.csv)
    if df is None:
        return 1
    for out_path in make_figs(df, args.outdir):
        print("Saved:", out_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
