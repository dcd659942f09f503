#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_sweep.py
------------
Shortest-path statistics over random mazes:
- Generates random mazes across (sizes x densities x seeds)
- Computes the step map from the top-left start
- Records reachability, shortest length and the number of shortest paths
  (counted layer by layer, never enumerated)
- Writes one CSV row per maze to <outdir>/sweep_<timestamp>.csv

Example:
    python -m mazepaths.cli.run_sweep \
        --sizes 8x8,16x16 \
        --densities 0.10,0.25 \
        --num-envs 50 \
        --seed 0 \
        --outdir results/csv
"""

from __future__ import annotations
import argparse
import csv
import os
import time
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from ..envs import generate_maze
from ..planners import compute_distance_field, count_shortest_paths

FIELDS = ["H", "W", "density", "env_seed", "reachable", "distance", "num_paths",
          "reachable_cells", "time_s"]


def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    out = []
    for token in s.split(","):
        token = token.strip().lower()
        if not token:
            continue
        h, w = token.split("x")
        out.append((int(h), int(w)))
    return out


def _parse_densities(s: str) -> List[float]:
    out = []
    for token in s.split(","):
        token = token.strip()
        if not token:
            continue
        out.append(float(token[:-1]) / 100.0 if token.endswith("%") else float(token))
    return out


def sweep_row(H: int, W: int, density: float, env_seed: int) -> dict:
    maze = generate_maze(H, W, density=density, ensure_status="any",
                         rng=np.random.default_rng(env_seed))
    t0 = time.perf_counter()
    steps_map = compute_distance_field(maze, maze.origin)
    num_paths = count_shortest_paths(steps_map, maze.destination)
    elapsed = time.perf_counter() - t0
    distance = steps_map.get(maze.destination)
    return {
        "H": H, "W": W, "density": density, "env_seed": env_seed,
        "reachable": int(distance is not None),
        "distance": -1 if distance is None else distance,
        "num_paths": num_paths,
        "reachable_cells": steps_map.reachable_count,
        "time_s": round(elapsed, 6),
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Shortest-path statistics over random mazes.")
    ap.add_argument("--sizes", type=str, default="8x8,16x16", help="Comma list of HxW")
    ap.add_argument("--densities", type=str, default="0.10,0.20,0.30",
                    help="Comma list of obstacle densities (0-1 or %%)")
    ap.add_argument("--num-envs", type=int, default=20, help="Mazes per (size, density)")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--outdir", type=str, default="results/csv", help="Output directory")
    ap.add_argument("--quiet", action="store_true", help="No progress bar")
    args = ap.parse_args(argv)

    sizes = _parse_sizes(args.sizes)
    densities = _parse_densities(args.densities)
    if not sizes or not densities:
        ap.error("need at least one size and one density")

    os.makedirs(args.outdir, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_path = os.path.join(args.outdir, f"sweep_{stamp}.csv")

    jobs = [(H, W, d, args.seed + i)
            for (H, W) in sizes for d in densities for i in range(args.num_envs)]
    with open(out_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for H, W, d, env_seed in tqdm(jobs, desc="mazes", disable=args.quiet):
            writer.writerow(sweep_row(H, W, d, env_seed))

    print(f"Saved: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
