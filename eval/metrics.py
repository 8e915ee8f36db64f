#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Checks and measurements for labeled grids and reconstructed paths.

Assumptions
-----------
- Grid: envs.grid.Grid (labels > 0, barriers -1, empty 0)
- Planner API: planner.plan(grid, start, goal) -> {'success': bool, 'path': ...}

What's inside
-------------
- manhattan() distance
- validate_path(): adjacency / label-decrement / barrier checks on one path
- label_layers(): number of cells per label (BFS layer sizes)
- oracle_distances(): hop distances from SciPy's csgraph, independent of the
  wave propagator (used to cross-check labels)
"""

from __future__ import annotations
from typing import Dict, Sequence

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import shortest_path

from envs.grid import Coord, Grid


def manhattan(a: Coord, b: Coord) -> int:
    return abs(int(a[0]) - int(b[0])) + abs(int(a[1]) - int(b[1]))


# ------------------------------- Path checks -------------------------------- #

def validate_path(grid: Grid, path: Sequence[Coord]) -> Dict:
    """
    A path is valid when it is non-empty, starts on label 1, every step is a
    4-neighbour move onto a non-barrier cell, and labels grow by exactly one
    per step. Returns {'valid': bool, 'reason': str}.
    """
    if not path:
        return {'valid': False, 'reason': 'empty path'}
    for p in path:
        if not grid.in_bounds(p):
            return {'valid': False, 'reason': f'{tuple(p)} out of bounds'}
        if grid.is_barrier(p):
            return {'valid': False, 'reason': f'{tuple(p)} is a barrier'}
    if grid.label_of(path[0]) != 1:
        return {'valid': False, 'reason': f'path starts on label {grid.label_of(path[0])}, not 1'}
    for a, b in zip(path, path[1:]):
        if manhattan(a, b) != 1:
            return {'valid': False, 'reason': f'{tuple(a)} -> {tuple(b)} is not a 4-neighbour step'}
        if grid.label_of(b) != grid.label_of(a) + 1:
            return {'valid': False,
                    'reason': f'label {grid.label_of(a)} -> {grid.label_of(b)} at {tuple(b)}'}
    return {'valid': True, 'reason': ''}


def label_layers(grid: Grid) -> Dict[int, int]:
    """{label: number of cells carrying it}."""
    labels = grid.labels()
    vals, counts = np.unique(labels[labels > 0], return_counts=True)
    return {int(v): int(n) for v, n in zip(vals, counts)}


# ------------------------------ Distance oracle ----------------------------- #

def _adjacency(occupancy: np.ndarray):
    H, W = occupancy.shape
    idx = np.arange(H * W).reshape(H, W)
    free = ~occupancy
    # right and down neighbours; the graph is undirected
    right = free[:, :-1] & free[:, 1:]
    down = free[:-1, :] & free[1:, :]
    r = np.concatenate([idx[:, :-1][right], idx[:-1, :][down]])
    c = np.concatenate([idx[:, 1:][right], idx[1:, :][down]])
    data = np.ones(r.shape[0], dtype=np.float64)
    return coo_matrix((data, (r, c)), shape=(H * W, H * W)).tocsr()


def oracle_distances(occupancy: np.ndarray, source: Coord) -> np.ndarray:
    """
    (H, W) float array of step distances from `source` over free cells
    (np.inf where unreachable or blocked).
    """
    occ = np.asarray(occupancy, dtype=bool)
    H, W = occ.shape
    sr, sc = source
    if occ[sr, sc]:
        return np.full((H, W), np.inf)
    graph = _adjacency(occ)
    dist = shortest_path(graph, method="D", directed=False, unweighted=True,
                         indices=sr * W + sc)
    dist = dist.reshape(H, W)
    dist[occ] = np.inf
    return dist
