import numpy as np
import pytest

from envs.generator import (
    SCENARIO_BARRIERS,
    generate_environment,
    has_path,
    reachable_mask,
    scenario_grid,
)
from envs.grid import Grid
from planners.wave import WavePropagator


def make_env(seed=0, ensure="any", H=20, W=20, density=0.2):
    rng = np.random.default_rng(seed)
    return generate_environment(H=H, W=W, density=density, ensure_status=ensure, rng=rng)


def test_shape_and_free_endpoints():
    env = make_env(seed=3, H=15, W=25, density=0.3)
    assert env.shape == (15, 25)
    assert env.H == 15 and env.W == 25
    assert env.start == (0, 0) and env.goal == (14, 24)
    assert not env.grid.is_barrier(env.start)
    assert not env.grid.is_barrier(env.goal)
    assert env.grid.labeled_count() == 0
    assert abs(env.settings["achieved_density"] - 0.3) < 0.1


def test_same_seed_same_layout():
    a = make_env(seed=42)
    b = make_env(seed=42)
    assert np.array_equal(a.grid.occupancy(), b.grid.occupancy())


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_ensure_status(seed):
    ok = make_env(seed=seed, ensure="success", density=0.3)
    assert has_path(ok.grid.occupancy(), ok.start, ok.goal)
    bad = make_env(seed=seed, ensure="failure", density=0.35)
    assert not has_path(bad.grid.occupancy(), bad.start, bad.goal)


def test_clearance_keeps_neighbourhood_free():
    env = generate_environment(12, 12, density=0.4, start=(6, 6), goal=(0, 0), clearance=1,
                               rng=np.random.default_rng(0))
    for p in [(6, 6), (5, 6), (7, 6), (6, 5), (6, 7), (0, 0), (1, 0), (0, 1)]:
        assert not env.grid.is_barrier(p)


def test_bad_arguments():
    with pytest.raises(ValueError):
        generate_environment(10, 10, ensure_status="maybe")
    with pytest.raises(ValueError):
        generate_environment(10, 10, density=1.0)
    with pytest.raises(ValueError):
        generate_environment(10, 10, goal=(10, 10))


def test_reachable_mask_agrees_with_wave():
    env = make_env(seed=7, density=0.3)
    WavePropagator().propagate(env.grid, env.start)
    mask = reachable_mask(env.grid.occupancy(), env.start)
    assert np.array_equal(mask, env.grid.labels() > 0)


def test_reachable_mask_blocked_or_outside_source():
    g = Grid.from_barriers(3, 3, [(1, 1)])
    assert not reachable_mask(g.occupancy(), (1, 1)).any()
    assert not reachable_mask(g.occupancy(), (5, 5)).any()
    assert not has_path(g.occupancy(), (0, 0), (3, 3))


def test_scenario_grid():
    g = scenario_grid()
    assert g.shape == (20, 20)
    assert sorted(g.barriers()) == sorted(SCENARIO_BARRIERS)
