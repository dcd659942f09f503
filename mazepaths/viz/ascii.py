#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text diagrams of grids, distance fields and paths.

Every cell is drawn five characters wide between '|' walls, with a
'-----' separator line above each row:

    |-----|-----|
    |  S  |  X  |
    |-----|-----|
    |     |  E  |
    |-----|-----|

Cell (r, c) has its center at line 2r+1, column 6c+3.
"""

from __future__ import annotations
from typing import List, Sequence

from ..envs.grid import Cell, Coord, Grid
from ..planners.distance_field import UNREACHED, DistanceField

_SYMBOLS = {
    Cell.FREE: " ",
    Cell.BLOCKED: "X",
    Cell.ORIGIN: "S",
    Cell.DESTINATION: "E",
}


def _separator(cols: int) -> str:
    return "|" + "-----|" * cols


def _frame(grid: Grid, cell_text) -> str:
    rows, cols = grid.shape
    lines = []
    for r in range(rows):
        lines.append(_separator(cols))
        lines.append("|" + "".join(cell_text((r, c)) + "|" for c in range(cols)))
    lines.append(_separator(cols))
    return "\n".join(lines) + "\n"


def format_grid(grid: Grid) -> str:
    """Grid diagram: X blocked, S start, E finish, blank free."""
    return _frame(grid, lambda pos: f"  {_SYMBOLS[grid.label(pos)]}  ")


def format_distance_field(grid: Grid, field: DistanceField) -> str:
    """Distance diagram: X for blocked cells, the raw hop count (-1 = unreached) otherwise."""
    if not field.empty:
        assert field.shape == grid.shape, f"field {field.shape} does not match grid {grid.shape}"

    def cell(pos):
        if grid.is_blocked(pos):
            return "  X  "
        value = UNREACHED if field.empty else field.raw(pos)
        return f"{value:>3}  "

    return _frame(grid, cell)


def format_path(grid: Grid, path: Sequence[Coord]) -> str:
    """Grid diagram with 'o' on path cells and '|' / '-' joining consecutive cells."""
    canvas: List[List[str]] = [list(line) for line in format_grid(grid).splitlines()]

    def center(pos):
        return 2 * pos[0] + 1, 6 * pos[1] + 3

    for pos in path:
        line, col = center(pos)
        canvas[line][col] = "o"

    for prev, cur in zip(path, path[1:]):
        (la, ca), (lb, cb) = center(prev), center(cur)
        if la != lb:
            lo, hi = min(la, lb), max(la, lb)
            for line in range(lo + 1, hi):
                canvas[line][ca] = "|"
        if ca != cb:
            lo, hi = min(ca, cb), max(ca, cb)
            for col in range(lo + 1, hi):
                canvas[lb][col] = "-"

    return "\n".join("".join(line) for line in canvas) + "\n"


def format_report(grid: Grid, field: DistanceField, paths: Sequence[Sequence[Coord]],
                  destination: Coord) -> str:
    """Maze, step map, one diagram per path, then the two summary lines."""
    if field.empty or not field.valid(destination):
        length = UNREACHED
    else:
        length = field.raw(destination)

    parts = ["maze:\n", format_grid(grid),
             "\nstep map:\n", format_distance_field(grid, field),
             "\npaths:\n"]
    for path in paths:
        parts.append(format_path(grid, path))
        parts.append("\n")
    parts.append(f"\nshortest path length: {length}")
    parts.append(f"\nnumber of shortest paths: {len(paths)}\n")
    return "".join(parts)
