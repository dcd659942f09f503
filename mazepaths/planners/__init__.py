# -*- coding: utf-8 -*-
"""
Planners on labelled grids with a unified API:
planner.plan(grid: Grid | np.ndarray[bool], start: (r,c), goal: (r,c))
  -> {'success': bool, 'path': List[(r,c)] or None, 'paths': [...], 'distance': int or None}

The underlying pieces are exported as well:
- compute_distance_field / multi_source_distance_field -> DistanceField
- enumerate_shortest_paths / count_shortest_paths / is_shortest_path
"""

from __future__ import annotations
from typing import Dict, Type

from .distance_field import (
    UNREACHED,
    DistanceField,
    compute_distance_field,
    multi_source_distance_field,
)
from .shortest_paths import (
    AllShortestPathsPlanner,
    InconsistentFieldError,
    Path,
    TooManyPathsError,
    count_shortest_paths,
    enumerate_shortest_paths,
    is_shortest_path,
)

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "all_shortest": AllShortestPathsPlanner,
}

__all__ = [
    "UNREACHED",
    "DistanceField",
    "compute_distance_field",
    "multi_source_distance_field",
    "AllShortestPathsPlanner",
    "InconsistentFieldError",
    "TooManyPathsError",
    "Path",
    "count_shortest_paths",
    "enumerate_shortest_paths",
    "is_shortest_path",
    "PLANNERS",
]
