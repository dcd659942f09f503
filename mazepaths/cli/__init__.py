# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m mazepaths.cli.<name>`):

- run_maze  : one maze -> maze / step map / path diagrams + summary
- run_sweep : random mazes -> CSV of shortest lengths and path counts
- make_figs : plots from run_sweep CSVs
"""
__all__ = [
    "run_maze",
    "run_sweep",
    "make_figs",
]
