#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_demo.py
-----------
Console walkthrough of wave propagation and backtrace:
- Builds a grid and marks barriers
- Propagates from the source once per budget, printing the labeled grid and
  resetting labels in between
- Propagates over the whole grid, backtraces to the target, prints the path

Example:
    python -m cli.run_demo \
        --size 20x20 \
        --barriers "5,10;15,10" \
        --source 0,0 --target 19,19 \
        --budgets 11,22 \
        --fig results/figs/demo_path.png

Cell legend: X barrier, . unlabeled, * path, number = wave label.
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional, Tuple

from envs.grid import Grid
from planners.backtrace import PathReconstructor
from planners.wave import WavePropagator
from viz.text import format_grid


# -------------------- helpers -------------------- #

def _parse_size(s: str) -> Tuple[int, int]:
    token = s.strip().lower()
    if "x" not in token:
        raise ValueError(f"Bad size '{token}', expected like 20x20")
    h, w = token.split("x")
    return int(h), int(w)


def _parse_coord(s: str) -> Tuple[int, int]:
    r, c = s.strip().split(",")
    return int(r), int(c)


def _parse_coords(s: str) -> List[Tuple[int, int]]:
    return [_parse_coord(tok) for tok in s.split(";") if tok.strip()]


def _parse_budgets(s: str) -> List[int]:
    return [int(tok) for tok in s.split(",") if tok.strip()]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Wave propagation and backtrace demo on a barrier grid.")
    ap.add_argument("--size", type=str, default="20x20", help="Grid size like 20x20 (rows x cols)")
    ap.add_argument("--barriers", type=str, default="5,10;15,10",
                    help="Semicolon-separated barrier cells 'r,c;r,c'")
    ap.add_argument("--source", type=str, default="0,0", help="Source cell 'r,c'")
    ap.add_argument("--target", type=str, default="19,19", help="Backtrace target cell 'r,c'")
    ap.add_argument("--budgets", type=str, default="11,22",
                    help="Comma-separated labeling budgets, one demo propagation each")
    ap.add_argument("--fig", type=str, default="", help="If set, save the final path figure (PNG/PDF) here")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    rows, cols = _parse_size(args.size)
    source = _parse_coord(args.source)
    target = _parse_coord(args.target)

    grid = Grid(rows, cols)
    grid.mark_barriers(_parse_coords(args.barriers))

    wave = WavePropagator()
    for budget in _parse_budgets(args.budgets):
        print(f"Wave propagation with {budget} labeled cells:")
        res = wave.propagate(grid, source, budget)
        if not res['success']:
            print(f"[run_demo] Invalid start position {source}")
            return 1
        print(format_grid(grid))
        print()
        grid.reset_labels()

    wave.propagate(grid, source)
    print("Backtracing the path:")
    back = PathReconstructor().reconstruct(grid, target)
    print(format_grid(grid, back['path']))
    print()
    if back['path']:
        print(f"[run_demo] {back['status'].value}: {len(back['path'])} cells "
              f"{back['path'][0]} -> {back['path'][-1]}")
    else:
        print(f"[run_demo] {back['status'].value}: no path to {target}")

    if args.fig:
        from viz.figures import save_grid_figure  # lazy import; pulls in matplotlib
        save_grid_figure(grid, args.fig, path=back['path'],
                         title=f"wave {source} -> {target}")
        print(f"[OK] Wrote: {args.fig}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
