import numpy as np
import pytest

from envs.generator import generate_environment, scenario_grid
from envs.grid import Grid, Status
from eval.metrics import validate_path
from planners.backtrace import PathReconstructor
from planners.wave import WavePropagator


def labeled_scenario(budget=None):
    g = scenario_grid()
    WavePropagator().propagate(g, (0, 0), budget)
    return g


def test_scenario_backtrace_to_far_corner():
    g = labeled_scenario(budget=400)
    res = PathReconstructor().reconstruct(g, (19, 19))
    path = res['path']
    assert res['success'] and res['status'] is Status.OK
    assert len(path) == 39
    assert path[0] == (0, 0) and path[-1] == (19, 19)
    assert (5, 10) not in path and (15, 10) not in path
    assert validate_path(g, path)['valid']
    labels = [g.label_of(p) for p in path]
    assert labels == list(range(1, 40))


def test_tie_break_prefers_up_then_left():
    g = labeled_scenario()
    path = PathReconstructor().reconstruct(g, (19, 19))['path']
    expected = [(0, c) for c in range(20)] + [(r, 19) for r in range(1, 20)]
    assert path == expected


def test_custom_order_left_first():
    g = labeled_scenario()
    rec = PathReconstructor(order=((0, -1), (-1, 0), (1, 0), (0, 1)))
    path = rec.reconstruct(g, (19, 19))['path']
    expected = [(r, 0) for r in range(20)] + [(19, c) for c in range(1, 20)]
    assert path == expected


def test_unlabeled_target_gives_empty_path():
    g = labeled_scenario(budget=11)
    res = PathReconstructor().reconstruct(g, (19, 19))
    assert res['path'] == []
    assert res['status'] is Status.UNREACHABLE
    assert not res['success']


def test_barrier_target_is_unreachable():
    g = labeled_scenario()
    res = PathReconstructor().reconstruct(g, (5, 10))
    assert res['path'] == [] and res['status'] is Status.UNREACHABLE


def test_out_of_bounds_target():
    g = labeled_scenario()
    res = PathReconstructor().reconstruct(g, (20, 0))
    assert res['path'] == [] and res['status'] is Status.OUT_OF_BOUNDS


def test_source_as_target():
    g = labeled_scenario()
    res = PathReconstructor().reconstruct(g, (0, 0))
    assert res['path'] == [(0, 0)] and res['success']


def test_inconsistent_labels_return_partial_path(caplog):
    g = Grid(1, 5)
    for c, label in [(0, 1), (1, 2), (3, 4), (4, 5)]:  # gap at (0, 2)
        g.set_label((0, c), label)
    res = PathReconstructor().reconstruct(g, (0, 4))
    assert res['status'] is Status.INCONSISTENT_LABELING
    assert not res['success']
    assert res['path'] == [(0, 3), (0, 4)]
    assert "partial path" in caplog.text


def test_reconstruct_does_not_mutate_grid():
    g = labeled_scenario()
    before = g.as_array()
    PathReconstructor().reconstruct(g, (12, 17))
    assert np.array_equal(g.as_array(), before)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_paths_step_down_one_label_at_a_time(seed):
    rng = np.random.default_rng(seed)
    env = generate_environment(30, 30, density=0.25, ensure_status="success", rng=rng)
    WavePropagator().propagate(env.grid, env.start)
    rec = PathReconstructor()
    targets = np.argwhere(env.grid.labels() > 0)
    for r, c in targets[rng.choice(len(targets), size=min(10, len(targets)), replace=False)]:
        target = (int(r), int(c))
        res = rec.reconstruct(env.grid, target)
        path = res['path']
        assert res['success']
        assert path[0] == env.start and path[-1] == target
        assert len(path) == env.grid.label_of(target)
        assert validate_path(env.grid, path)['valid']


def test_bad_order_rejected():
    with pytest.raises(ValueError):
        PathReconstructor(order=((-1, 0), (1, 0), (0, -1)))
