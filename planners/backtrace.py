#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Backtrace of a labeled grid: recover one shortest path by stepping from the
target to any neighbour whose label is one lower, until label 1 (the source).

Ties between equally low neighbours are broken by a fixed priority
(up, down, left, right), so the same labels always give the same path.

Returns {'success': bool, 'status': Status, 'path': List[(r,c)]}.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from envs.grid import Coord, Grid, Status

logger = logging.getLogger(__name__)

# up, down, left, right
BACKTRACE_ORDER: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class PathReconstructor:
    def __init__(self, order: Sequence[Tuple[int, int]] = BACKTRACE_ORDER):
        deltas = tuple((int(dr), int(dc)) for dr, dc in order)
        if sorted(deltas) != sorted(BACKTRACE_ORDER):
            raise ValueError(f"order must be a permutation of {BACKTRACE_ORDER}, got {order}")
        self.deltas = deltas

    def _previous(self, grid: Grid, current: Coord, level: int) -> Optional[Coord]:
        r, c = current
        for dr, dc in self.deltas:
            nb = (r + dr, c + dc)
            if grid.label_of(nb) == level:
                return nb
        return None

    def reconstruct(self, grid: Grid, target: Coord) -> Dict:
        """Shortest path source -> target read off the labels; never mutates `grid`."""
        if not grid.in_bounds(target):
            logger.warning("Backtrace target %s outside %dx%d grid", target, grid.rows, grid.cols)
            return {'success': False, 'status': Status.OUT_OF_BOUNDS, 'path': []}

        current: Coord = (int(target[0]), int(target[1]))
        level = grid.label_of(current)
        if level == 0:
            return {'success': False, 'status': Status.UNREACHABLE, 'path': []}

        path: List[Coord] = [current]
        status = Status.OK
        while level > 1:
            prev = self._previous(grid, current, level - 1)
            if prev is None:
                logger.warning("No neighbour labeled %d next to %s; returning partial path",
                               level - 1, current)
                status = Status.INCONSISTENT_LABELING
                break
            current = prev
            level -= 1
            path.append(current)

        path.reverse()
        return {'success': status is Status.OK, 'status': status, 'path': path}
