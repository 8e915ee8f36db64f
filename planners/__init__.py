# -*- coding: utf-8 -*-
"""
Wave propagation and backtrace on barrier grids, plus a planner facade with
the unified API:
planner.plan(grid: Grid | np.ndarray[bool], start: (r,c), goal: (r,c))
  -> {'success': bool, 'path': List[(r,c)] or None, ...}
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .wave import PROPAGATION_ORDER, WavePropagator
from .backtrace import BACKTRACE_ORDER, PathReconstructor
from .planner import WavePlanner

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "wave": WavePlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of the keys of PLANNERS (currently only 'wave')
    kwargs : dict
        Passed to the planner constructor (e.g., budget=100)

    Returns
    -------
    planner instance
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "PROPAGATION_ORDER",
    "BACKTRACE_ORDER",
    "WavePropagator",
    "PathReconstructor",
    "WavePlanner",
    "PLANNERS",
    "get_planner",
]
