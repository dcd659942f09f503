#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_maze.py
-----------
Solve one maze and print its diagrams:
- the maze, the step map (BFS hop counts from S), one diagram per shortest
  path from S to E, then the shortest length and the number of paths
- optionally save the same three views as PNGs (--plots DIR)

Example:
  python -m mazepaths.cli.run_maze                      # built-in 'detour'
  python -m mazepaths.cli.run_maze --scenario lattice --max-paths 500
  python -m mazepaths.cli.run_maze --file my_maze.txt --plots results/png
  python -m mazepaths.cli.run_maze --random 12x16 --density 0.25 --seed 3

Maze files: one row per line with 0 free, 1 blocked, 2 start, 3 finish
(or JSON {"rows": [[...]]}).
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional, Sequence, Tuple

import numpy as np

from ..envs import (
    DEFAULT_SCENARIO,
    SCENARIOS,
    MarkerNotFoundError,
    generate_maze,
    load_grid_file,
    load_scenario,
)
from ..planners import (
    TooManyPathsError,
    compute_distance_field,
    count_shortest_paths,
    enumerate_shortest_paths,
)
from ..viz.ascii import format_report


def _parse_size(s: str) -> Tuple[int, int]:
    token = s.strip().lower()
    h, w = token.split("x")
    return int(h), int(w)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate all shortest paths through a maze.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--scenario", type=str, default=None,
                     help=f"Built-in maze: {','.join(SCENARIOS)} (default {DEFAULT_SCENARIO})")
    src.add_argument("--file", type=str, default=None, help="Maze file (.txt digits or .json)")
    src.add_argument("--random", type=_parse_size, default=None, metavar="HxW",
                     help="Random maze of size HxW (e.g., 12x16)")
    ap.add_argument("--density", type=float, default=0.2, help="Obstacle density for --random")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for --random")
    ap.add_argument("--max-paths", type=int, default=10_000,
                    help="Refuse to enumerate more shortest paths than this (0 = no limit)")
    ap.add_argument("--plots", type=str, default=None, help="Directory for PNG figures")
    ap.add_argument("--list", action="store_true", help="List built-in scenarios and exit")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.list:
        for name in SCENARIOS:
            print(name)
        return 0

    try:
        if args.file:
            maze = load_grid_file(args.file)
        elif args.random:
            H, W = args.random
            maze = generate_maze(H, W, density=args.density, ensure_status="any",
                                 rng=np.random.default_rng(args.seed))
        else:
            maze = load_scenario(args.scenario or DEFAULT_SCENARIO)
    except (OSError, KeyError, ValueError) as e:
        ap.error(str(e))

    try:
        start, finish = maze.origin, maze.destination
    except MarkerNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    steps_map = compute_distance_field(maze, start)
    max_paths = args.max_paths or None
    if max_paths is not None:
        n = count_shortest_paths(steps_map, finish)
        if n > max_paths:
            print(f"error: {n} shortest paths exceed --max-paths {max_paths}", file=sys.stderr)
            return 1
    try:
        paths = enumerate_shortest_paths(steps_map, finish, max_paths=max_paths)
    except TooManyPathsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(format_report(maze, steps_map, paths, finish))

    if args.plots:
        from ..viz.plot import save_report_figures  # matplotlib only when asked
        for out_path in save_report_figures(maze, steps_map, paths, args.plots):
            print(f"Saved: {out_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
