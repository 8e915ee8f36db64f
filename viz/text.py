# -*- coding: utf-8 -*-
"""Plain-text rendering of a grid: X barrier, * path, . empty, label otherwise."""

from __future__ import annotations
from typing import Iterable, Optional, Set

from envs.grid import Coord, Grid


def on_path(path: Optional[Iterable[Coord]], coord: Coord) -> bool:
    if not path:
        return False
    return tuple(coord) in {tuple(p) for p in path}


def format_grid(grid: Grid, path: Optional[Iterable[Coord]] = None) -> str:
    marked: Set[Coord] = {(int(r), int(c)) for r, c in path} if path else set()
    lines = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            if grid.is_barrier((r, c)):
                row.append("X")
            elif (r, c) in marked:
                row.append("*")
            else:
                label = grid.label_of((r, c))
                row.append(str(label) if label else ".")
        lines.append(" ".join(row))
    return "\n".join(lines)
