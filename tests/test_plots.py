import importlib

import matplotlib
matplotlib.use('Agg')

import pytest

plots = importlib.import_module('iwc.visualization.plots')
demo = importlib.import_module('iwc.cli.demo')
calculate_inventory_space = importlib.import_module('iwc.core.inventory_space').calculate_inventory_space


@pytest.fixture(autouse=True)
def no_show(monkeypatch):
    monkeypatch.setattr(plots.plt, 'show', lambda: None)
    yield
    plots.plt.close('all')


def test_plot_rate_curve(cavern):
    plots.plot_rate_curve(cavern, n_points=11)
    assert plots.plt.gca().get_title()


def test_plot_inventory_space(cavern):
    df = calculate_inventory_space(cavern, [0.0] * 3, [10000.0] * 3, 0.0, 0.0, 0.0)
    plots.plot_inventory_space(df)
    assert len(plots.plt.gca().lines) == 2


def test_demo_runs(capsys):
    demo.main()
    assert 'inventory_upper' in capsys.readouterr().out
