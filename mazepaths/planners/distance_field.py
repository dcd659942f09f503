#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-first distance labelling on 4-connected grids.
- Level-synchronous BFS: a cell found in round k holds exactly k.
- Blocked cells are never expanded and read as "unreached".
- Degenerate inputs (empty grid, no valid origin) give an empty field.
"""

from __future__ import annotations
from collections import deque
from typing import Iterable, Optional, Tuple
import numpy as np

from ..envs.grid import DELTAS_4, Coord, Grid

UNREACHED = -1


class DistanceField:
    """
    Read-only hop-count field. `field[coord]` is an int, or None when the
    cell was never reached (blocked cells included; ask the Grid to tell
    the two apart).
    """

    def __init__(self, values: np.ndarray, origins: Tuple[Coord, ...] = ()):
        values = np.array(values, dtype=np.int32, copy=True)
        if values.ndim != 2:
            raise ValueError(f"distance field must be 2-D, got shape {values.shape}")
        values.setflags(write=False)
        self._values = values
        self.origins = tuple(origins)

    @classmethod
    def empty_field(cls) -> "DistanceField":
        return cls(np.zeros((0, 0), dtype=np.int32))

    @property
    def shape(self) -> Tuple[int, int]:
        return self._values.shape

    @property
    def empty(self) -> bool:
        return self._values.size == 0

    @property
    def origin(self) -> Optional[Coord]:
        return self.origins[0] if self.origins else None

    def valid(self, coord: Coord) -> bool:
        r, c = coord
        H, W = self._values.shape
        return 0 <= r < H and 0 <= c < W

    def raw(self, coord: Coord) -> int:
        """Stored value, UNREACHED (-1) included."""
        assert self.valid(coord), f"coordinate {coord} outside field of shape {self.shape}"
        return int(self._values[coord])

    def get(self, coord: Coord) -> Optional[int]:
        v = self.raw(coord)
        return None if v == UNREACHED else v

    __getitem__ = get

    def is_reached(self, coord: Coord) -> bool:
        return self.raw(coord) != UNREACHED

    @property
    def reachable_count(self) -> int:
        return int((self._values != UNREACHED).sum())

    @property
    def max_distance(self) -> Optional[int]:
        if self.reachable_count == 0:
            return None
        return int(self._values.max())

    def as_array(self) -> np.ndarray:
        """Read-only int32 array with UNREACHED = -1."""
        return self._values

    def __eq__(self, other) -> bool:
        if not isinstance(other, DistanceField):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"DistanceField(shape={self.shape}, reached={self.reachable_count})"


def multi_source_distance_field(grid: Grid, sources: Iterable[Coord]) -> DistanceField:
    """
    BFS hop counts from the nearest of `sources`. Out-of-bounds sources are
    skipped; if none is valid the result is an empty field.
    """
    if grid.empty:
        return DistanceField.empty_field()
    seeds = []
    for s in sources:
        s = (int(s[0]), int(s[1]))
        if grid.valid(s) and s not in seeds:
            seeds.append(s)
    if not seeds:
        return DistanceField.empty_field()

    H, W = grid.shape
    blocked = grid.blocked
    dist = np.full((H, W), UNREACHED, dtype=np.int32)
    frontier = deque()
    for s in seeds:
        dist[s] = 0
        frontier.append(s)

    step = 0
    while frontier:
        step += 1
        # Only the cells that were queued before this round belong to it
        for _ in range(len(frontier)):
            r, c = frontier.popleft()
            for dr, dc in DELTAS_4:
                nr, nc = r + int(dr), c + int(dc)
                if nr < 0 or nr >= H or nc < 0 or nc >= W:
                    continue
                if blocked[nr, nc] or dist[nr, nc] != UNREACHED:
                    continue
                dist[nr, nc] = step
                frontier.append((nr, nc))

    return DistanceField(dist, origins=tuple(seeds))


def compute_distance_field(grid: Grid, origin: Coord) -> DistanceField:
    """Single-source BFS labelling; the origin holds 0 whatever its label."""
    return multi_source_distance_field(grid, [origin])
