#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Dense 2D grid of cell states used by the wave propagator and the backtracer.

Cell encoding (numpy int32, indexed [row, col]):
    -1  barrier (impassable)
     0  empty (traversable, unlabeled)
    >0  label = steps from the propagation source + 1 (source = 1)

Coordinates are (row, col) tuples. Anything outside [0, rows) x [0, cols)
is invalid; mutating calls on such coordinates report Status.OUT_OF_BOUNDS
and leave the grid unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]  # (row, col)

BARRIER = -1
EMPTY = 0


def _rc(coord: Coord) -> Coord:
    return int(coord[0]), int(coord[1])


class Status(str, Enum):
    OK = "ok"
    OUT_OF_BOUNDS = "out_of_bounds"
    INVALID_START = "invalid_start"
    UNREACHABLE = "unreachable"
    INCONSISTENT_LABELING = "inconsistent_labeling"


class InvalidDimensions(ValueError):
    """Raised when a grid is constructed with a non-positive size."""


class CellKind(str, Enum):
    EMPTY = "empty"
    BARRIER = "barrier"
    LABELED = "labeled"


@dataclass(frozen=True)
class CellState:
    kind: CellKind
    distance: int = 0

    @classmethod
    def from_value(cls, v: int) -> "CellState":
        if v == BARRIER:
            return cls(CellKind.BARRIER)
        if v > 0:
            return cls(CellKind.LABELED, int(v))
        return cls(CellKind.EMPTY)

    @property
    def is_barrier(self) -> bool:
        return self.kind is CellKind.BARRIER

    @property
    def is_labeled(self) -> bool:
        return self.kind is CellKind.LABELED


class Grid:
    """Fixed-size grid; owns all cell data and mutates it in place."""

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(f"Grid needs positive dimensions, got {rows}x{cols}")
        self._cells = np.zeros((int(rows), int(cols)), dtype=np.int32)

    # ------------------------------ constructors ------------------------------ #

    @classmethod
    def create(cls, rows: int, cols: int) -> "Grid":
        return cls(rows, cols)

    @classmethod
    def from_barriers(cls, rows: int, cols: int, barriers: Iterable[Coord]) -> "Grid":
        g = cls(rows, cols)
        g.mark_barriers(barriers)
        return g

    @classmethod
    def from_occupancy(cls, occupancy: np.ndarray) -> "Grid":
        """Build from a bool mask (True = barrier)."""
        occ = np.asarray(occupancy, dtype=bool)
        if occ.ndim != 2:
            raise InvalidDimensions(f"Occupancy must be 2D, got shape {occ.shape}")
        H, W = occ.shape
        g = cls(H, W)
        g._cells[occ] = BARRIER
        return g

    # -------------------------------- geometry -------------------------------- #

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._cells.shape

    @property
    def cells(self) -> np.ndarray:
        """Live (H, W) int32 cell array; writes go straight into the grid."""
        return self._cells

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    # ---------------------------------- reads --------------------------------- #

    def get(self, coord: Coord) -> Union[CellState, Status]:
        if not self.in_bounds(coord):
            return Status.OUT_OF_BOUNDS
        return CellState.from_value(int(self._cells[_rc(coord)]))

    def is_barrier(self, coord: Coord) -> bool:
        return self.in_bounds(coord) and self._cells[_rc(coord)] == BARRIER

    def label_of(self, coord: Coord) -> int:
        """Label at coord; 0 for empty, barrier or out-of-bounds cells."""
        if not self.in_bounds(coord):
            return 0
        v = int(self._cells[_rc(coord)])
        return v if v > 0 else 0

    def labeled_count(self) -> int:
        return int(np.count_nonzero(self._cells > 0))

    def barriers(self) -> List[Coord]:
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == BARRIER)]

    def labels(self) -> np.ndarray:
        """Copy of the label layer (0 where unlabeled or barrier)."""
        return np.where(self._cells > 0, self._cells, 0).astype(np.int32)

    def occupancy(self) -> np.ndarray:
        return self._cells == BARRIER

    def as_array(self) -> np.ndarray:
        return self._cells.copy()

    def copy(self) -> "Grid":
        g = Grid(self.rows, self.cols)
        g._cells[:] = self._cells
        return g

    # --------------------------------- writes --------------------------------- #

    def mark_barrier(self, coord: Coord) -> Status:
        if not self.in_bounds(coord):
            logger.warning("Invalid barrier position %s for %dx%d grid", coord, self.rows, self.cols)
            return Status.OUT_OF_BOUNDS
        self._cells[_rc(coord)] = BARRIER
        return Status.OK

    def mark_barriers(self, coords: Iterable[Coord]) -> List[Status]:
        return [self.mark_barrier(tuple(c)) for c in coords]

    def unmark_barrier(self, coord: Coord) -> Status:
        if not self.in_bounds(coord):
            logger.warning("Invalid barrier position %s for %dx%d grid", coord, self.rows, self.cols)
            return Status.OUT_OF_BOUNDS
        if self._cells[_rc(coord)] == BARRIER:
            self._cells[_rc(coord)] = EMPTY
        return Status.OK

    def set_label(self, coord: Coord, distance: int) -> Status:
        # Callers only label non-barrier cells; not checked here.
        if distance < 1:
            raise ValueError(f"Labels start at 1, got {distance}")
        if not self.in_bounds(coord):
            return Status.OUT_OF_BOUNDS
        self._cells[_rc(coord)] = distance
        return Status.OK

    def reset_labels(self) -> None:
        self._cells[self._cells > 0] = EMPTY

    def __repr__(self) -> str:
        return (f"Grid({self.rows}x{self.cols}, barriers={int(np.count_nonzero(self.occupancy()))}, "
                f"labeled={self.labeled_count()})")
