#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
WavePlanner: wave propagation + backtrace behind the unified planner API
planner.plan(grid, start, goal) -> {'success': bool, 'path': List[(r,c)] or None}

`grid` is either a Grid (labeled in place) or a bool occupancy array
(True = barrier), which is copied into a fresh Grid.
"""

from __future__ import annotations

import time
from typing import Dict, Optional, Tuple, Union

import numpy as np

from envs.grid import Grid, Status
from .backtrace import PathReconstructor
from .wave import WavePropagator


class WavePlanner:
    def __init__(self, budget: Optional[int] = None,
                 propagator: Optional[WavePropagator] = None,
                 reconstructor: Optional[PathReconstructor] = None):
        self.budget = budget
        self.propagator = propagator or WavePropagator()
        self.reconstructor = reconstructor or PathReconstructor()
        self.grid: Optional[Grid] = None
        self.execution_time = 0.0

    def plan(self, grid: Union[Grid, np.ndarray], start: Tuple[int, int],
             goal: Tuple[int, int]) -> Dict:
        start_time = time.time()
        g = grid if isinstance(grid, Grid) else Grid.from_occupancy(grid)
        self.grid = g

        wave = self.propagator.propagate(g, start, self.budget)
        if not wave['success']:
            self.execution_time = time.time() - start_time
            return {'success': False, 'path': None, 'status': wave['status'], 'wave': wave}

        back = self.reconstructor.reconstruct(g, goal)
        self.execution_time = time.time() - start_time
        path = back['path'] if back['status'] is Status.OK else None
        return {'success': path is not None, 'path': path, 'status': back['status'], 'wave': wave}
