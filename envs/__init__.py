# -*- coding: utf-8 -*-
"""
Grid data model and environment generation.
Exposes:
- Grid, CellState, CellKind, Status, InvalidDimensions (from grid.py)
- GridEnvironment, generate_environment(...), scenario_grid() (from generator.py)
- reachable_mask(...), has_path(...)  connectivity oracle (SciPy labeling)
"""

from __future__ import annotations

from .grid import (
    BARRIER,
    EMPTY,
    CellKind,
    CellState,
    Coord,
    Grid,
    InvalidDimensions,
    Status,
)
from .generator import (
    GridEnvironment,
    generate_environment,
    has_path,
    reachable_mask,
    scenario_grid,
)

__all__ = [
    "BARRIER",
    "EMPTY",
    "CellKind",
    "CellState",
    "Coord",
    "Grid",
    "InvalidDimensions",
    "Status",
    "GridEnvironment",
    "generate_environment",
    "has_path",
    "reachable_mask",
    "scenario_grid",
]
