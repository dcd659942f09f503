# -*- coding: utf-8 -*-
"""
Read-only views of grids, distance fields and paths.
- ascii: text diagrams (used by the CLIs)
- plot : matplotlib figures (import mazepaths.viz.plot explicitly)
"""

from __future__ import annotations

from .ascii import format_distance_field, format_grid, format_path, format_report

__all__ = [
    "format_grid",
    "format_distance_field",
    "format_path",
    "format_report",
]
