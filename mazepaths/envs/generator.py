#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random maze generator producing labelled Grids for tests, sweeps and demos.

Strategy:
  1) Randomly place obstacle masks (rectangles + blobs) until the target
     density is met, keeping a 'moat' of free cells between obstacles.
  2) Free the start/finish cells and label them (2 = start, 3 = finish).
  3) Optionally enforce reachability:
       "any"     : no guarantee
       "success" : resample until the finish is reachable (4-connected)
       "failure" : plug shortest routes until the finish is unreachable

Dependencies:
    numpy
    scipy.ndimage   (binary dilation for the moat test)

Usage (quick smoke test):
    python3 -m mazepaths.envs.generator
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np
from scipy.ndimage import binary_dilation

from .grid import DELTAS_4, Cell, Coord, Grid

ENSURE_STATUSES = ("any", "success", "failure")


# ------------------------------ Utility helpers ----------------------------- #

def _dilate_bool(img: np.ndarray, iters: int = 1) -> np.ndarray:
    if iters <= 0:
        return img
    structure = np.ones((3, 3), dtype=bool)
    return binary_dilation(img, structure=structure, iterations=int(iters))


def _stamp_mask(grid: np.ndarray,
                top_left: Tuple[int, int],
                mask: np.ndarray,
                moat: int) -> bool:
    """
    Stamp a boolean `mask` (True = blocked) onto `grid` at `top_left` unless
    it overlaps an obstacle or its `moat`-cell ring touches one.
    Returns True if stamped.
    """
    H, W = grid.shape
    mr, mc = mask.shape
    r0, c0 = top_left
    r1, c1 = r0 + mr, c0 + mc
    if r0 < 0 or c0 < 0 or r1 > H or c1 > W:
        return False

    target = grid[r0:r1, c0:c1]
    if (target & mask).any():
        return False

    if moat > 0:
        # Place the mask on a padded canvas so the dilated ring can spill
        # past its bounding box, then clip to the grid
        canvas = np.zeros((mr + 2 * moat, mc + 2 * moat), dtype=bool)
        canvas[moat:moat + mr, moat:moat + mc] = mask
        ring = _dilate_bool(canvas, iters=moat)

        rpad0, cpad0 = r0 - moat, c0 - moat
        gr0, gc0 = max(0, rpad0), max(0, cpad0)
        gr1, gc1 = min(H, r1 + moat), min(W, c1 + moat)
        ring = ring[gr0 - rpad0:gr1 - rpad0, gc0 - cpad0:gc1 - cpad0]
        if (grid[gr0:gr1, gc0:gc1] & ring).any():
            return False

    target |= mask
    return True


def _random_rectangle_mask(rng: np.random.Generator,
                           min_h: int, max_h: int,
                           min_w: int, max_w: int) -> np.ndarray:
    h = max(1, int(rng.integers(min_h, max_h + 1)))
    w = max(1, int(rng.integers(min_w, max_w + 1)))
    return np.ones((h, w), dtype=bool)


def _random_blob_mask(rng: np.random.Generator,
                      min_cells: int, max_cells: int) -> np.ndarray:
    """
    Grow a 4-connected polyomino of random size from a single cell.
    Returns the tight bounding-box mask.
    """
    n = max(1, int(rng.integers(min_cells, max_cells + 1)))
    side = 2 * n + 1
    canvas = np.zeros((side, side), dtype=bool)
    r = c = side // 2
    canvas[r, c] = True
    coords = [(r, c)]

    while len(coords) < n:
        base_r, base_c = coords[int(rng.integers(0, len(coords)))]
        dr, dc = DELTAS_4[int(rng.integers(0, 4))]
        nr, nc = base_r + int(dr), base_c + int(dc)
        if not canvas[nr, nc]:
            canvas[nr, nc] = True
            coords.append((nr, nc))

    ys, xs = np.where(canvas)
    return canvas[ys.min():ys.max() + 1, xs.min():xs.max() + 1]


def _first_shortest_route(blocked: np.ndarray, start: Coord, goal: Coord) -> Optional[List[Coord]]:
    """One shortest 4-connected route start -> goal, or None if unreachable."""
    from ..planners.distance_field import compute_distance_field

    H, W = blocked.shape
    field = compute_distance_field(Grid(H, W, blocked.astype(np.int8)), start)
    if not field.is_reached(goal):
        return None
    values = field.as_array()
    route = [goal]
    while values[route[-1]] != 0:
        r, c = route[-1]
        for dr, dc in DELTAS_4:
            nr, nc = r + int(dr), c + int(dc)
            if 0 <= nr < H and 0 <= nc < W and values[nr, nc] == values[r, c] - 1:
                route.append((nr, nc))
                break
    route.reverse()
    return route


def _place_obstacles(H: int, W: int, rng: np.random.Generator, *,
                     density: float, moat: int,
                     shape_probs: Dict[str, float],
                     rect_size: Tuple[Tuple[int, int], Tuple[int, int]],
                     blob_cells: Tuple[int, int],
                     max_place_tries: int) -> np.ndarray:
    grid = np.zeros((H, W), dtype=bool)
    tot = float(sum(shape_probs.values()))
    shape_keys = list(shape_probs.keys())
    shape_p = np.array([shape_probs[k] / tot for k in shape_keys], dtype=float)
    target_cells = int(round(density * H * W))

    for _ in range(max_place_tries):
        if int(grid.sum()) >= target_cells:
            break
        shape = shape_keys[rng.choice(len(shape_keys), p=shape_p)]
        if shape == "rect":
            (min_h, max_h), (min_w, max_w) = rect_size
            mask = _random_rectangle_mask(rng, min_h, max_h, min_w, max_w)
        else:
            mask = _random_blob_mask(rng, blob_cells[0], blob_cells[1])
        mr, mc = mask.shape
        if mr > H or mc > W:
            continue
        r0 = int(rng.integers(0, H - mr + 1))
        c0 = int(rng.integers(0, W - mc + 1))
        _stamp_mask(grid, (r0, c0), mask, moat=moat)
    return grid


# ------------------------------- Core generator ----------------------------- #

def generate_maze(
    H: int = 12,
    W: int = 12,
    *,
    density: float = 0.2,
    origin: Coord = (0, 0),
    destination: Optional[Coord] = None,
    moat: int = 1,
    shape_probs: Optional[Dict[str, float]] = None,
    rect_size: Tuple[Tuple[int, int], Tuple[int, int]] = ((1, 3), (1, 4)),  # (min_h,max_h),(min_w,max_w)
    blob_cells: Tuple[int, int] = (2, 6),    # min,max cells in blob
    ensure_status: str = "any",              # "any" | "success" | "failure"
    rng: Optional[np.random.Generator] = None,
    max_tries: int = 50,
    max_place_tries: int = 2000,
) -> Grid:
    """
    Random labelled maze with one start (2) and one finish (3) cell.

    Raises ValueError for bad arguments and RuntimeError when the requested
    `ensure_status` cannot be met within `max_tries`.
    """
    if ensure_status not in ENSURE_STATUSES:
        raise ValueError(f"ensure_status must be one of {ENSURE_STATUSES}, got {ensure_status!r}")
    if H <= 0 or W <= 0:
        raise ValueError(f"maze must be at least 1x1, got {H}x{W}")
    if destination is None:
        destination = (H - 1, W - 1)
    origin = (int(origin[0]), int(origin[1]))
    destination = (int(destination[0]), int(destination[1]))
    for name, (r, c) in (("origin", origin), ("destination", destination)):
        if not (0 <= r < H and 0 <= c < W):
            raise ValueError(f"{name} {(r, c)} outside {H}x{W} maze")
    if origin == destination:
        raise ValueError("origin and destination must differ")

    if shape_probs is None:
        shape_probs = {"rect": 0.6, "blob": 0.4}
    density = float(np.clip(density, 0.0, 0.9))
    rng = rng or np.random.default_rng()

    def draw() -> np.ndarray:
        g = _place_obstacles(H, W, rng, density=density, moat=moat,
                             shape_probs=shape_probs, rect_size=rect_size,
                             blob_cells=blob_cells, max_place_tries=max_place_tries)
        g[origin] = False
        g[destination] = False
        return g

    blocked = draw()

    if ensure_status == "success":
        for _ in range(max_tries):
            if _first_shortest_route(blocked, origin, destination) is not None:
                break
            blocked = draw()
        else:
            raise RuntimeError(f"no reachable {H}x{W} maze at density {density} in {max_tries} tries")

    elif ensure_status == "failure":
        # Plug the middle of a shortest route until none is left
        for _ in range(H * W):
            route = _first_shortest_route(blocked, origin, destination)
            if route is None:
                break
            if len(route) < 3:
                raise RuntimeError(f"origin {origin} and destination {destination} are adjacent; cannot cut")
            blocked[route[len(route) // 2]] = True
        else:
            raise RuntimeError("could not cut every route to the destination")

    labels = blocked.astype(np.int8)
    labels[origin] = Cell.ORIGIN
    labels[destination] = Cell.DESTINATION
    return Grid(H, W, labels)


# ---------------------------------- Demo ------------------------------------ #

if __name__ == "__main__":
    from ..viz.ascii import format_grid

    rng = np.random.default_rng(123)
    maze = generate_maze(10, 14, density=0.25, ensure_status="success", rng=rng)
    print("Maze:", maze.shape, "Start:", maze.origin, "Finish:", maze.destination)
    print("#Blocked cells:", int(maze.blocked.sum()))
    print(format_grid(maze), end="")
