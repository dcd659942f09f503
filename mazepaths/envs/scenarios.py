#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
scenarios.py
------------
Built-in mazes and loaders for maze files.

Label guide: 0 free, 1 blocked, 2 start (S), 3 finish (E).

File formats accepted by load_grid_file():
- .json : {"rows": [[...], ...]} or a bare nested list
- other : one row per line, digits only; whitespace and commas are
          ignored, '#' starts a comment, blank lines are skipped
"""

from __future__ import annotations

import json
import os
from typing import Dict, List

from .grid import Grid, GridShapeError

DEFAULT_SCENARIO = "detour"

_SCENARIO_ROWS: Dict[str, List[List[int]]] = {
    # start boxed in on three sides; the finish sits on the far left
    "detour": [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 0],
        [0, 0, 1, 1, 1, 0],
        [3, 0, 1, 2, 0, 0],
        [0, 0, 1, 1, 1, 0],
        [0, 0, 0, 0, 1, 0],
        [0, 0, 0, 0, 0, 0],
    ],
    "corner": [
        [2, 0, 0, 1],
        [0, 0, 0, 0],
        [0, 0, 1, 0],
        [1, 0, 0, 3],
    ],
    "islands": [
        [0, 1, 0, 0, 0, 0, 0, 0],
        [0, 1, 2, 1, 0, 1, 1, 0],
        [0, 1, 0, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 1, 0],
        [1, 1, 0, 1, 0, 0, 0, 0],
        [1, 0, 0, 0, 0, 1, 0, 0],
        [1, 1, 0, 1, 0, 0, 3, 0],
        [0, 0, 0, 1, 0, 0, 0, 0],
    ],
    # pillars on every other cell: many equally short routes
    "lattice": [
        [2, 1, 0, 1, 0, 1, 0, 1, 0],
        [0, 0, 0, 0, 0, 0, 0, 0, 0],
        [1, 0, 1, 0, 1, 0, 1, 0, 1],
        [0, 0, 0, 0, 0, 0, 0, 0, 0],
        [0, 1, 0, 1, 0, 1, 0, 1, 0],
        [0, 0, 0, 0, 0, 0, 0, 0, 0],
        [1, 0, 1, 0, 1, 0, 1, 0, 1],
        [0, 0, 0, 0, 0, 0, 0, 0, 0],
        [0, 1, 0, 1, 0, 1, 0, 1, 3],
    ],
}

SCENARIOS = tuple(sorted(_SCENARIO_ROWS))


def load_scenario(name: str = DEFAULT_SCENARIO) -> Grid:
    """Grid for a built-in scenario name."""
    key = name.strip().lower()
    if key not in _SCENARIO_ROWS:
        raise KeyError(f"Unknown scenario '{name}'. Available: {list(SCENARIOS)}")
    return Grid.from_rows(_SCENARIO_ROWS[key])


def parse_grid_text(text: str) -> Grid:
    rows = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0]
        cells = [ch for ch in line if not ch.isspace() and ch != ","]
        if not cells:
            continue
        if not all(ch.isdigit() for ch in cells):
            raise ValueError(f"line {lineno}: expected digit labels, got {line.strip()!r}")
        rows.append([int(ch) for ch in cells])
    return Grid.from_rows(rows)


def load_grid_file(path: str) -> Grid:
    """Grid from a JSON or plain-text maze file (see module docstring)."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    if os.path.splitext(path)[1].lower() != ".json":
        return parse_grid_text(text)

    data = json.loads(text)
    if isinstance(data, dict):
        if "rows" not in data:
            raise GridShapeError(f"{path}: JSON object needs a 'rows' key")
        data = data["rows"]
    if not isinstance(data, list) or not all(isinstance(r, list) for r in data):
        raise GridShapeError(f"{path}: expected a list of rows")
    return Grid.from_rows(data)
