#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
All-shortest-paths enumeration over a BFS distance field.

The walk starts at the destination and repeatedly steps to a neighbor whose
distance is exactly one lower, until it reaches a distance-0 cell. Whenever
several such neighbors exist, the walk continues with the first one (scan
order up, down, left, right) and each other one starts a cloned branch.
Branches live on an explicit stack, so long paths never hit the recursion
limit. Paths are returned origin -> destination.

Also here:
- count_shortest_paths(): layer-by-layer path counting, no enumeration
- is_shortest_path(): checks a path against a field
- AllShortestPathsPlanner: planner.plan(grid, start, goal) -> dict
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple, Union
import numpy as np

from ..envs.grid import DELTAS_4, Coord, Grid
from .distance_field import DistanceField, compute_distance_field

Path = Tuple[Coord, ...]


class InconsistentFieldError(RuntimeError):
    """A reached cell with nonzero distance has no predecessor."""


class TooManyPathsError(RuntimeError):
    """Enumeration produced more paths than the caller allowed."""

    def __init__(self, limit: int):
        super().__init__(f"more than {limit} shortest paths; raise max_paths or count them instead")
        self.limit = limit


def _predecessors(values: np.ndarray, coord: Coord) -> List[Coord]:
    H, W = values.shape
    r, c = coord
    want = int(values[r, c]) - 1
    out = []
    for dr, dc in DELTAS_4:
        nr, nc = r + int(dr), c + int(dc)
        if 0 <= nr < H and 0 <= nc < W and values[nr, nc] == want:
            out.append((nr, nc))
    return out


def enumerate_shortest_paths(field: DistanceField, destination: Coord,
                             max_paths: Optional[int] = None) -> List[Path]:
    """
    Every shortest path from the field's origin to `destination`.

    Returns [] for an empty field, an out-of-bounds destination or an
    unreached destination. Order is deterministic: the primary branch of
    each tie completes before the alternatives spawned along it.
    """
    destination = (int(destination[0]), int(destination[1]))
    if field.empty or not field.valid(destination) or not field.is_reached(destination):
        return []

    values = field.as_array()
    result: List[Path] = []
    stack: List[List[Coord]] = [[destination]]

    while stack:
        path = stack.pop()
        pending = []
        while values[path[-1]] != 0:
            preds = _predecessors(values, path[-1])
            if not preds:
                raise InconsistentFieldError(
                    f"cell {path[-1]} at distance {int(values[path[-1]])} has no predecessor"
                )
            for alt in preds[1:]:
                pending.append(path + [alt])
            path.append(preds[0])

        path.reverse()
        result.append(tuple(path))
        if max_paths is not None and len(result) > max_paths:
            raise TooManyPathsError(max_paths)
        # Later branch points sit nearer the origin; pop them first
        stack.extend(pending)

    return result


def count_shortest_paths(field: DistanceField, destination: Coord) -> int:
    """Number of shortest paths to `destination` (0 if unreached)."""
    destination = (int(destination[0]), int(destination[1]))
    if field.empty or not field.valid(destination) or not field.is_reached(destination):
        return 0

    values = field.as_array()
    target = int(values[destination])
    counts = np.zeros(values.shape, dtype=object)
    counts[values == 0] = 1
    H, W = values.shape
    for d in range(1, target + 1):
        for r, c in np.argwhere(values == d):
            total = 0
            for dr, dc in DELTAS_4:
                nr, nc = int(r) + int(dr), int(c) + int(dc)
                if 0 <= nr < H and 0 <= nc < W and values[nr, nc] == d - 1:
                    total += counts[nr, nc]
            counts[r, c] = total
    return int(counts[destination])


def is_shortest_path(field: DistanceField, path: Sequence[Coord]) -> bool:
    """True if `path` starts at distance 0 and climbs one hop per 4-connected step."""
    if field.empty or not path:
        return False
    prev = None
    for i, coord in enumerate(path):
        coord = (int(coord[0]), int(coord[1]))
        if not field.valid(coord) or field.raw(coord) != i:
            return False
        if prev is not None and abs(coord[0] - prev[0]) + abs(coord[1] - prev[1]) != 1:
            return False
        prev = coord
    return True


class AllShortestPathsPlanner:
    """
    Planner with the package-wide API:
    plan(grid, start, goal) -> {'success', 'path', 'paths', 'distance'}
    `grid` is a Grid, a bool array (True = obstacle) or an integer array
    of cell labels.
    """

    def __init__(self, connectivity: int = 4, max_paths: Optional[int] = None):
        assert connectivity == 4, "only 4-connected movement is supported"
        self.conn = connectivity
        self.max_paths = max_paths

    def plan(self, grid: Union[Grid, np.ndarray], start: Coord, goal: Coord) -> Dict:
        if not isinstance(grid, Grid):
            arr = np.asarray(grid)
            if arr.ndim != 2:
                raise ValueError(f"expected a 2-D grid, got shape {arr.shape}")
            if arr.dtype.kind == "b":
                arr = arr.astype(np.int8)
            elif arr.dtype.kind not in "iu":
                raise ValueError(f"expected a bool obstacle array or integer labels, got dtype {arr.dtype}")
            grid = Grid(arr.shape[0], arr.shape[1], arr)
        field = compute_distance_field(grid, start)
        paths = enumerate_shortest_paths(field, goal, max_paths=self.max_paths)
        distance = None
        if not field.empty and field.valid(goal):
            distance = field.get(goal)
        return {
            'success': bool(paths),
            'path': list(paths[0]) if paths else None,
            'paths': [list(p) for p in paths],
            'distance': distance,
        }
