import numpy as np
import pytest

from envs.generator import generate_environment, has_path
from envs.grid import Grid, Status
from eval.metrics import validate_path
from planners import PLANNERS, WavePlanner, get_planner


def make_env(seed=0, ensure="success", H=30, W=30, density=0.2):
    rng = np.random.default_rng(seed)
    return generate_environment(H=H, W=W, density=density, ensure_status=ensure, rng=rng)


def test_registry_and_factory():
    assert "wave" in PLANNERS
    planner = get_planner(" Wave ", budget=50)
    assert isinstance(planner, WavePlanner)
    assert planner.budget == 50
    with pytest.raises(ValueError):
        get_planner("a_star")


def test_plan_on_occupancy_array():
    env = make_env(seed=1)
    occ = env.grid.occupancy()
    planner = WavePlanner()
    res = planner.plan(occ, env.start, env.goal)
    assert res['success'] and res['status'] is Status.OK
    assert res['path'][0] == env.start and res['path'][-1] == env.goal
    assert validate_path(planner.grid, res['path'])['valid']
    # the caller's array is left alone
    assert np.array_equal(occ, env.grid.occupancy())


def test_plan_labels_grid_in_place():
    g = Grid.from_barriers(5, 5, [(1, 1), (2, 1), (3, 1)])
    planner = WavePlanner()
    res = planner.plan(g, (2, 0), (2, 2))
    assert planner.grid is g
    assert g.label_of((2, 0)) == 1
    assert len(res['path']) == g.label_of((2, 2)) == 7
    assert res['wave']['exhausted']


def test_plan_fails_on_failure_env():
    env = make_env(seed=2, ensure="failure", density=0.35)
    assert not has_path(env.grid.occupancy(), env.start, env.goal)
    res = WavePlanner().plan(env.grid, env.start, env.goal)
    assert not res['success']
    assert res['path'] is None
    assert res['status'] is Status.UNREACHABLE


def test_blocked_start_reports_invalid_start():
    occ = np.zeros((4, 4), dtype=bool)
    occ[0, 0] = True
    res = WavePlanner().plan(occ, (0, 0), (3, 3))
    assert not res['success']
    assert res['status'] is Status.INVALID_START


def test_small_budget_leaves_goal_unlabeled():
    res = WavePlanner(budget=5).plan(np.zeros((10, 10), dtype=bool), (0, 0), (9, 9))
    assert not res['success']
    assert res['status'] is Status.UNREACHABLE
    assert res['wave']['labeled'] == 5
