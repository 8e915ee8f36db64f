#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random barrier-grid generator for exercising the wave propagator.

Key design goals:
- Barriers are stamped as small rectangles (wall segments) plus single-cell
  clutter until a target density is reached.
- Start and goal are always free.
- Reachability is answered independently of the propagator, via SciPy
  connected-component labeling on the free-space mask (4-connected), so it
  can serve as an oracle in tests and batch runs.
- Reproducibility: explicit np.random.Generator with seed.

Dependencies:
    numpy
    scipy.ndimage   (connected-component labeling & binary dilation)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
from scipy.ndimage import binary_dilation, generate_binary_structure
from scipy.ndimage import label as cc_label

from .grid import Coord, Grid

logger = logging.getLogger(__name__)

# 4-connected structuring element (cross)
STRUCTURE_4 = generate_binary_structure(2, 1)

SCENARIO_SIZE = (20, 20)
SCENARIO_BARRIERS = ((5, 10), (15, 10))


# ------------------------------- Data classes ------------------------------- #

@dataclass
class GridEnvironment:
    """Barrier grid with a designated start and goal."""
    grid: Grid
    start: Coord
    goal: Coord
    settings: Dict              # record of generator settings used (for provenance)
    rng: np.random.Generator

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def H(self) -> int:
        return self.grid.rows

    @property
    def W(self) -> int:
        return self.grid.cols


# ------------------------------ Reachability ------------------------------- #

def reachable_mask(occupancy: np.ndarray, source: Coord) -> np.ndarray:
    """
    Bool mask of free cells 4-connected to `source` (empty if source is blocked
    or out of bounds).
    """
    occ = np.asarray(occupancy, dtype=bool)
    H, W = occ.shape
    sr, sc = source
    if not (0 <= sr < H and 0 <= sc < W) or occ[sr, sc]:
        return np.zeros_like(occ, dtype=bool)
    comp, _ = cc_label(~occ, structure=STRUCTURE_4)
    return comp == comp[sr, sc]


def has_path(occupancy: np.ndarray, start: Coord, goal: Coord) -> bool:
    mask = reachable_mask(occupancy, start)
    gr, gc = goal
    H, W = mask.shape
    return bool(0 <= gr < H and 0 <= gc < W and mask[gr, gc])


# -------------------------- Shape / stamping helpers ------------------------ #

def _random_rectangle_mask(rng: np.random.Generator,
                           min_h: int, max_h: int,
                           min_w: int, max_w: int) -> np.ndarray:
    h = max(1, int(rng.integers(min_h, max_h + 1)))
    w = max(1, int(rng.integers(min_w, max_w + 1)))
    return np.ones((h, w), dtype=bool)


def _stamp_mask(occ: np.ndarray,
                top_left: Coord,
                mask: np.ndarray,
                keep_free: np.ndarray) -> bool:
    """
    Stamp `mask` onto `occ` at `top_left` unless it leaves the grid or covers a
    cell in `keep_free`. Returns True if stamped.
    """
    H, W = occ.shape
    mr, mc = mask.shape
    r0, c0 = top_left
    r1, c1 = r0 + mr, c0 + mc
    if r0 < 0 or c0 < 0 or r1 > H or c1 > W:
        return False
    if (keep_free[r0:r1, c0:c1] & mask).any():
        return False
    occ[r0:r1, c0:c1] |= mask
    return True


# ------------------------------- Core generator ----------------------------- #

def generate_environment(
    H: int = 20,
    W: int = 20,
    *,
    density: float = 0.2,
    start: Coord = (0, 0),
    goal: Optional[Coord] = None,
    wall_prob: float = 0.5,
    wall_size: Tuple[Tuple[int, int], Tuple[int, int]] = ((1, 4), (1, 4)),  # (min_h,max_h),(min_w,max_w)
    clearance: int = 0,
    ensure_status: str = "any",              # "any" | "success" | "failure"
    rng: Optional[np.random.Generator] = None,
    max_tries: int = 200,
    max_place_tries: int = 5000,
) -> GridEnvironment:
    """
    Create a barrier grid.

    Strategy:
      1) Randomly place wall rectangles (prob `wall_prob`) or single cells until
         the barrier density reaches `density`; cells within `clearance` of the
         start/goal stay free.
      2) Re-draw the layout (up to `max_tries`) until it matches `ensure_status`.

    ensure_status:
        "any"     : no guarantee about path existence.
        "success" : goal is reachable from start.
        "failure" : goal is not reachable from start.

    Raises RuntimeError when no layout matching `ensure_status` was found.
    """
    if ensure_status not in ("any", "success", "failure"):
        raise ValueError(f"Unknown ensure_status '{ensure_status}'")
    if not 0.0 <= density < 1.0:
        raise ValueError(f"density must be in [0, 1), got {density}")
    start = (int(start[0]), int(start[1]))
    goal = (H - 1, W - 1) if goal is None else (int(goal[0]), int(goal[1]))
    if rng is None:
        rng = np.random.default_rng()

    probe = Grid(H, W)
    for name, p in (("start", start), ("goal", goal)):
        if not probe.in_bounds(p):
            raise ValueError(f"{name} {p} outside {H}x{W} grid")

    keep_free = np.zeros((H, W), dtype=bool)
    keep_free[start] = True
    keep_free[goal] = True
    if clearance > 0:
        keep_free = binary_dilation(keep_free, structure=STRUCTURE_4, iterations=int(clearance))

    target_cells = int(round(density * H * W))
    (min_h, max_h), (min_w, max_w) = wall_size

    for attempt in range(max_tries):
        occ = np.zeros((H, W), dtype=bool)
        tries = 0
        while int(occ.sum()) < target_cells and tries < max_place_tries:
            tries += 1
            if rng.random() < wall_prob:
                mask = _random_rectangle_mask(rng, min_h, max_h, min_w, max_w)
            else:
                mask = np.ones((1, 1), dtype=bool)
            r0 = int(rng.integers(0, H))
            c0 = int(rng.integers(0, W))
            _stamp_mask(occ, (r0, c0), mask, keep_free)

        ok = has_path(occ, start, goal)
        if ensure_status == "any" or (ensure_status == "success") == ok:
            settings = dict(H=H, W=W, density=density, wall_prob=wall_prob,
                            wall_size=wall_size, clearance=clearance,
                            ensure_status=ensure_status, attempts=attempt + 1,
                            achieved_density=float(occ.mean()))
            logger.debug("Generated %dx%d grid after %d attempt(s), density=%.3f",
                         H, W, attempt + 1, settings["achieved_density"])
            return GridEnvironment(grid=Grid.from_occupancy(occ), start=start, goal=goal,
                                   settings=settings, rng=rng)

    raise RuntimeError(f"Could not generate a '{ensure_status}' grid in {max_tries} tries "
                       f"(H={H}, W={W}, density={density})")


def scenario_grid() -> Grid:
    """20x20 grid with barriers at (5,10) and (15,10)."""
    return Grid.from_barriers(*SCENARIO_SIZE, SCENARIO_BARRIERS)


if __name__ == "__main__":
    env = generate_environment(20, 20, density=0.25, ensure_status="success",
                               rng=np.random.default_rng(0))
    print(env.grid, env.start, env.goal, env.settings)
