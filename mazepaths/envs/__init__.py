# -*- coding: utf-8 -*-
"""
Grids, built-in scenarios and random maze generation.
Exposes:
- Grid, Cell, Coord, neighbors4 (from grid.py)
- load_scenario(...), load_grid_file(...), SCENARIOS (from scenarios.py)
- generate_maze(...) (from generator.py)
"""

from __future__ import annotations

from .grid import (
    DELTAS_4,
    Cell,
    Coord,
    Grid,
    GridShapeError,
    MarkerNotFoundError,
    neighbors4,
)
from .scenarios import (
    DEFAULT_SCENARIO,
    SCENARIOS,
    load_grid_file,
    load_scenario,
    parse_grid_text,
)
from .generator import generate_maze

__all__ = [
    "DELTAS_4",
    "Cell",
    "Coord",
    "Grid",
    "GridShapeError",
    "MarkerNotFoundError",
    "neighbors4",
    "DEFAULT_SCENARIO",
    "SCENARIOS",
    "load_grid_file",
    "load_scenario",
    "parse_grid_text",
    "generate_maze",
]
