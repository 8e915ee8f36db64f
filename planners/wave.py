#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Wave propagation (Lee-style breadth-first labeling) on a barrier grid.
- 4-connected, unit steps; the source gets label 1, each BFS layer one more.
- Labels are written straight into the Grid; a cell's label doubles as its
  visited mark.
- Optional budget: stop once that many cells carry a label.

Returns {'success': bool, 'status': Status, 'labeled': int, 'max_label': int,
         'exhausted': bool}.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Optional, Sequence, Tuple

from envs.grid import EMPTY, Coord, Grid, Status

logger = logging.getLogger(__name__)

# down, up, right, left
PROPAGATION_ORDER: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class WavePropagator:
    def __init__(self, order: Sequence[Tuple[int, int]] = PROPAGATION_ORDER):
        deltas = tuple((int(dr), int(dc)) for dr, dc in order)
        if sorted(deltas) != sorted(PROPAGATION_ORDER):
            raise ValueError(f"order must be a permutation of {PROPAGATION_ORDER}, got {order}")
        self.deltas = deltas

    def propagate(self, grid: Grid, source: Coord,
                  max_labeled_count: Optional[int] = None) -> Dict:
        """
        Label every reachable cell with its BFS distance from `source` (+1).

        Labels left over from a previous run are cleared first (barriers kept).
        With `max_labeled_count`, propagation stops as soon as that many cells are
        labeled; otherwise it runs until the frontier is empty. An out-of-bounds or
        barrier source leaves the grid untouched and reports INVALID_START.
        """
        if max_labeled_count is not None and max_labeled_count < 1:
            raise ValueError(f"max_labeled_count must be >= 1, got {max_labeled_count}")
        if not grid.in_bounds(source) or grid.is_barrier(source):
            logger.warning("Invalid start position %s", source)
            return {'success': False, 'status': Status.INVALID_START,
                    'labeled': 0, 'max_label': 0, 'exhausted': False}

        budget = max_labeled_count if max_labeled_count is not None else grid.rows * grid.cols
        cells = grid.cells
        H, W = grid.shape

        grid.reset_labels()
        sr, sc = int(source[0]), int(source[1])
        cells[sr, sc] = 1
        labeled = 1
        max_label = 1

        dq = deque()
        dq.append((sr, sc))

        while dq and labeled < budget:
            r, c = dq.popleft()
            nxt = int(cells[r, c]) + 1
            for dr, dc in self.deltas:
                nr, nc = r + dr, c + dc
                if nr < 0 or nr >= H or nc < 0 or nc >= W:
                    continue
                if cells[nr, nc] != EMPTY:  # barrier or already labeled
                    continue
                cells[nr, nc] = nxt
                labeled += 1
                max_label = nxt
                dq.append((nr, nc))
                if labeled >= budget:
                    dq.appendleft((r, c))  # may still have unvisited neighbours
                    break

        # Frontier may still hold cells whose neighbours are all taken.
        exhausted = not any(self._has_empty_neighbor(cells, r, c) for r, c in dq)
        logger.debug("Wave from %s: %d cell(s) labeled, max label %d, exhausted=%s",
                     source, labeled, max_label, exhausted)
        return {'success': True, 'status': Status.OK, 'labeled': labeled,
                'max_label': max_label, 'exhausted': exhausted}

    def _has_empty_neighbor(self, cells, r: int, c: int) -> bool:
        H, W = cells.shape
        for dr, dc in self.deltas:
            nr, nc = r + dr, c + dc
            if 0 <= nr < H and 0 <= nc < W and cells[nr, nc] == EMPTY:
                return True
        return False
