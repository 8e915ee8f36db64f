#!/usr/bin/env python3
import importlib, sys, traceback, numpy as np
from pathlib import Path

# --- Ensure the repo root is on sys.path ---
ROOT = Path(__file__).resolve().parent.parent  # repo root = parent of scripts/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

OK = "\x1b[92mOK\x1b[0m"
BAD = "\x1b[91mERR\x1b[0m"

def check(name, fn):
    try:
        fn()
        print(f"[{OK}] {name}")
    except Exception as e:
        print(f"[{BAD}] {name}: {e}")
        traceback.print_exc()
        sys.exit(1)

def test_envs():
    gen = importlib.import_module("envs.generator")
    env = gen.generate_environment(H=20, W=20, density=0.30)
    assert env.grid.shape == (20, 20)
    assert not env.grid.is_barrier(env.start)

def test_wave():
    from envs.generator import scenario_grid
    W = importlib.import_module("planners.wave").WavePropagator()
    g = scenario_grid()
    assert W.propagate(g, (0, 0), 11)["labeled"] == 11
    g.reset_labels()
    assert W.propagate(g, (0, 0), 22)["labeled"] == 22

def test_backtrace():
    from envs.generator import scenario_grid
    from planners.wave import WavePropagator
    P = importlib.import_module("planners.backtrace").PathReconstructor()
    g = scenario_grid()
    WavePropagator().propagate(g, (0, 0), 400)
    path = P.reconstruct(g, (19, 19))["path"]
    assert len(path) == 39 and (5, 10) not in path and (15, 10) not in path

def test_oracle():
    from envs.generator import generate_environment
    from eval.metrics import oracle_distances
    from planners import get_planner
    env = generate_environment(H=25, W=25, density=0.25, rng=np.random.default_rng(0))
    res = get_planner("wave").plan(env.grid, env.start, env.goal)
    d = oracle_distances(env.grid.occupancy(), env.start)[env.goal]
    assert (len(res["path"] or []) == int(d) + 1) if np.isfinite(d) else not res["success"]

def test_cli_help():
    import subprocess, sys
    for mod in ["cli.run_demo", "cli.run_batch"]:
        r = subprocess.run([sys.executable, "-m", mod, "--help"], stdout=subprocess.PIPE,
                           stderr=subprocess.STDOUT, cwd=str(ROOT))
        assert r.returncode == 0, f"{mod} --help failed"

if __name__ == "__main__":
    check("envs", test_envs)
    check("planners.wave", test_wave)
    check("planners.backtrace", test_backtrace)
    check("eval.metrics oracle", test_oracle)
    check("CLIs --help", test_cli_help)
    print(f"[{OK}] All self-checks passed.")
