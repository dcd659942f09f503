#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Immutable labelled grid used by every planner in the package.

Cell labels (closed set):
    0 FREE         walkable
    1 BLOCKED      obstacle
    2 ORIGIN       walkable, start marker
    3 DESTINATION  walkable, finish marker

Coordinates are (row, col) tuples. Neighbors are 4-connected and always
enumerated in the order up, down, left, right.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Sequence, Tuple, Union

import numpy as np

Coord = Tuple[int, int]

# 4-connected neighborhood deltas: up, down, left, right
DELTAS_4 = np.array([
    (-1, 0), (1, 0), (0, -1), (0, 1)
], dtype=np.int8)


class Cell(IntEnum):
    FREE = 0
    BLOCKED = 1
    ORIGIN = 2
    DESTINATION = 3


class GridShapeError(ValueError):
    """Label count does not match rows x cols."""


class MarkerNotFoundError(LookupError):
    """No cell carries the requested label."""


def neighbors4(coord: Coord) -> Iterator[Coord]:
    """Yield the four axis-aligned neighbors (unchecked) of `coord`."""
    r, c = coord
    for dr, dc in DELTAS_4:
        yield (r + int(dr), c + int(dc))


class Grid:
    """
    Read-only M x N grid of cell labels.

    Parameters
    ----------
    rows, cols : int
        Grid dimensions.
    labels : sequence
        Flat sequence of rows*cols labels, or nested rows of length cols.
    """

    def __init__(self, rows: int, cols: int,
                 labels: Union[Sequence[int], Sequence[Sequence[int]], np.ndarray]):
        rows, cols = int(rows), int(cols)
        if rows < 0 or cols < 0:
            raise GridShapeError(f"negative grid dimensions {rows}x{cols}")

        arr = _as_label_array(labels, rows, cols)
        if arr.size != rows * cols:
            raise GridShapeError(
                f"expected {rows * cols} labels for a {rows}x{cols} grid, got {arr.size}"
            )
        arr = arr.reshape(rows, cols)

        bad = ~np.isin(arr, [int(c) for c in Cell])
        if bad.any():
            r, c = (int(x) for x in np.argwhere(bad)[0])
            raise ValueError(f"invalid cell label {int(arr[r, c])} at {(r, c)}")

        self._labels = arr.astype(np.int8)
        self._labels.setflags(write=False)
        self._blocked = self._labels == Cell.BLOCKED
        self._blocked.setflags(write=False)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from nested rows, inferring the dimensions."""
        rows = [list(r) for r in rows]
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        for i, r in enumerate(rows):
            if len(r) != n_cols:
                raise GridShapeError(f"row {i} has {len(r)} labels, expected {n_cols}")
        return cls(n_rows, n_cols, [v for r in rows for v in r])

    # ------------------------------ Shape ------------------------------ #

    @property
    def rows(self) -> int:
        return self._labels.shape[0]

    @property
    def cols(self) -> int:
        return self._labels.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._labels.shape

    @property
    def empty(self) -> bool:
        return self._labels.size == 0

    # ------------------------------ Access ----------------------------- #

    @property
    def labels(self) -> np.ndarray:
        """Read-only (rows, cols) int8 array of labels."""
        return self._labels

    @property
    def blocked(self) -> np.ndarray:
        """Read-only bool mask: True = obstacle, False = walkable."""
        return self._blocked

    def valid(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def label(self, coord: Coord) -> Cell:
        assert self.valid(coord), f"coordinate {coord} outside {self.rows}x{self.cols} grid"
        return Cell(int(self._labels[coord]))

    def is_blocked(self, coord: Coord) -> bool:
        assert self.valid(coord), f"coordinate {coord} outside {self.rows}x{self.cols} grid"
        return bool(self._blocked[coord])

    # ----------------------------- Markers ----------------------------- #

    def find(self, label: Union[Cell, int]) -> Coord:
        """First coordinate (row-major) carrying `label`."""
        hits = np.argwhere(self._labels == int(label))
        if hits.size == 0:
            raise MarkerNotFoundError(f"no cell labelled {Cell(int(label)).name} in grid")
        r, c = hits[0]
        return (int(r), int(c))

    @property
    def origin(self) -> Coord:
        return self.find(Cell.ORIGIN)

    @property
    def destination(self) -> Coord:
        return self.find(Cell.DESTINATION)

    # ------------------------------ Misc ------------------------------- #

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._labels, other._labels))

    def __hash__(self) -> int:
        return hash((self.shape, self._labels.tobytes()))

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, blocked={int(self._blocked.sum())})"


def _as_label_array(labels, rows: int, cols: int) -> np.ndarray:
    if isinstance(labels, np.ndarray):
        if labels.ndim > 1 and labels.shape != (rows, cols):
            raise GridShapeError(f"label array of shape {labels.shape} for a {rows}x{cols} grid")
        arr = labels.ravel()
    else:
        flat = []
        for i, item in enumerate(labels):
            if isinstance(item, (list, tuple, np.ndarray)):
                if len(item) != cols:
                    raise GridShapeError(f"row {i} has {len(item)} labels, expected {cols}")
                flat.extend(item)
            else:
                flat.append(item)
        arr = np.asarray(flat)

    if arr.size == 0:
        return arr.astype(np.int64).ravel()
    if arr.dtype.kind == "f":
        if not np.all(np.isfinite(arr)) or np.any(arr != np.round(arr)):
            raise ValueError("cell labels must be integers")
    elif arr.dtype.kind not in "biu":
        raise ValueError(f"cell labels must be integers, got dtype {arr.dtype}")
    return arr.astype(np.int64).ravel()
