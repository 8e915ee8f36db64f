import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from envs.generator import scenario_grid
from planners.backtrace import PathReconstructor
from planners.wave import WavePropagator
from viz.figures import render_grid, save_grid_figure
from viz.text import format_grid, on_path


def test_format_budget_11_grid():
    g = scenario_grid()
    WavePropagator().propagate(g, (0, 0), 11)
    lines = format_grid(g).splitlines()
    assert len(lines) == 20
    assert lines[0].split() == ["1", "2", "3", "4"] + ["."] * 16
    assert lines[4].split() == ["5"] + ["."] * 19
    assert lines[5].split()[10] == "X"
    assert lines[15].split()[10] == "X"


def test_format_with_path():
    g = scenario_grid()
    WavePropagator().propagate(g, (0, 0))
    path = PathReconstructor().reconstruct(g, (19, 19))['path']
    text = format_grid(g, path)
    assert text.count("*") == 39
    assert text.count("X") == 2
    assert text.splitlines()[0].split() == ["*"] * 20


def test_on_path():
    path = [(0, 0), (0, 1)]
    assert on_path(path, (0, 1))
    assert not on_path(path, (1, 1))
    assert not on_path([], (0, 0))
    assert not on_path(None, (0, 0))


def test_render_and_save(tmp_path):
    g = scenario_grid()
    WavePropagator().propagate(g, (0, 0))
    path = PathReconstructor().reconstruct(g, (19, 19))['path']

    ax = render_grid(g, path=path, title="scenario", show_labels=True)
    assert ax.get_title() == "scenario"
    plt.close(ax.figure)

    out = tmp_path / "figs" / "scenario.png"
    save_grid_figure(g, out, path=path)
    assert out.exists() and out.stat().st_size > 0
