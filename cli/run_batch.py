#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_batch.py
------------
Batch check of the wave planner on random barrier grids:
- Generates random environments across (sizes x densities x seeds)
- Runs WavePlanner (optionally with a labeling budget)
- Validates each path (adjacency, label decrement, no barriers) and compares
  its length against the SciPy distance oracle
- Writes results to CSV in --outdir

Example:
    python -m cli.run_batch \
        --sizes 20x20,40x40 \
        --densities 0.10,0.25 \
        --num-envs 20 \
        --seed 0
"""

from __future__ import annotations
import argparse
import csv
import logging
import os
import time
from typing import List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from envs.generator import generate_environment
from eval.metrics import oracle_distances, validate_path
from planners import get_planner


# -------------------- helpers -------------------- #

def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    sizes: List[Tuple[int, int]] = []
    for token in s.split(","):
        token = token.strip().lower()
        if "x" not in token:
            raise ValueError(f"Bad size '{token}', expected like 30x30")
        h, w = token.split("x")
        sizes.append((int(h), int(w)))
    return sizes


def _parse_densities(s: str) -> List[float]:
    vals = []
    for token in s.split(","):
        token = token.strip()
        if token.endswith("%"):
            vals.append(float(token[:-1]) / 100.0)
        else:
            vals.append(float(token))
    return vals


def _ensure_dir(path: str):
    os.makedirs(path, exist_ok=True)


FIELDNAMES = [
    "env_id", "H", "W", "density", "budget",
    "status", "success", "labeled", "max_label", "exhausted",
    "path_len", "oracle_len", "path_valid", "reason", "time_sec",
]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Batch-check wave propagation on random barrier grids.")
    ap.add_argument("--sizes", type=str, default="20x20,30x30",
                    help="Comma-separated grid sizes like 20x20,30x30")
    ap.add_argument("--densities", type=str, default="0.10,0.20,0.30",
                    help="Comma-separated densities (0–1 or %%, e.g., 10%%)")
    ap.add_argument("--num-envs", type=int, default=20, help="Environments per (size,density)")
    ap.add_argument("--budget", type=int, default=0, help="Labeling budget per run (0 = unbounded)")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--outdir", type=str, default="results/csv", help="Output directory for CSV")
    ap.add_argument("--no-progress", action="store_true", help="Disable the tqdm progress bar")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    sizes = _parse_sizes(args.sizes)
    densities = _parse_densities(args.densities)
    budget = args.budget or None
    planner = get_planner("wave", budget=budget)

    # Prepare output CSV (unique, atomic)
    _ensure_dir(args.outdir)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_csv = os.path.join(args.outdir, f"batch_s{args.seed}_{stamp}.csv")
    tmp_csv = out_csv + f".tmp_{os.getpid()}"

    jobs = [(H, W, dens, i) for (H, W) in sizes for dens in densities for i in range(args.num_envs)]
    n_invalid = 0
    n_mismatch = 0

    with open(tmp_csv, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()

        for env_id, (H, W, dens, _) in enumerate(tqdm(jobs, desc="batch", disable=args.no_progress)):
            # Unique seed per environment
            base = (int(args.seed) * 1_000_003 + int(env_id) * 97 + int(H) * 11 + int(W) * 13
                    + int(round(dens * 1000)) * 17) % 2**32
            env = generate_environment(H, W, density=dens, ensure_status="any",
                                       rng=np.random.default_rng(base))

            res = planner.plan(env.grid, env.start, env.goal)
            oracle = oracle_distances(env.grid.occupancy(), env.start)[env.goal]
            oracle_len = int(oracle) + 1 if np.isfinite(oracle) else 0

            path = res['path'] or []
            check = validate_path(env.grid, path) if path else {'valid': False, 'reason': 'no path'}
            if path and not check['valid']:
                n_invalid += 1
            if budget is None and len(path) != oracle_len:
                n_mismatch += 1

            writer.writerow({
                "env_id": env_id,
                "H": H, "W": W, "density": dens,
                "budget": budget or "",
                "status": res['status'].value,
                "success": int(res['success']),
                "labeled": res['wave']['labeled'],
                "max_label": res['wave']['max_label'],
                "exhausted": int(res['wave']['exhausted']),
                "path_len": len(path),
                "oracle_len": oracle_len,
                "path_valid": int(check['valid']),
                "reason": check['reason'],
                "time_sec": float(planner.execution_time),
            })

    # Atomic rename to final path
    os.replace(tmp_csv, out_csv)
    print(f"[run_batch] {len(jobs)} env(s), {n_invalid} invalid path(s), {n_mismatch} length mismatch(es)")
    print(f"[OK] Wrote: {out_csv}")
    return 0 if n_invalid == 0 and n_mismatch == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
