# -*- coding: utf-8 -*-
"""
Top-level package for all-shortest-paths search on labelled grids.
Provides a convenience factory for planners.
"""

from __future__ import annotations
from typing import Any

__all__ = [
    "__version__",
    "get_planner",
]

__version__ = "0.1.0"


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of the keys of `mazepaths.planners.PLANNERS` (e.g. 'all_shortest')
    kwargs : dict
        Passed to the planner constructor (e.g., max_paths=100)

    Returns
    -------
    planner instance
    """
    name = name.strip().lower()
    from .planners import PLANNERS  # lazy import
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)
