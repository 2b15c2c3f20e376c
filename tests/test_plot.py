import matplotlib.pyplot as plt

from bikecalc.constants import Rho0, Crr
from bikecalc.plot import plot_power_curve


def test_plot_power_curve():
    fig = plot_power_curve(Rho0, 0.3, Crr, 0, 0, 0, 0.02, 75, target=250)
    axes = fig.axes[0]
    assert len(axes.collections) == 4
    assert len(axes.lines) == 1
    assert axes.get_xlabel() == "Speed (km/h)"
    plt.close(fig)


def test_plot_power_curve_without_target():
    fig = plot_power_curve(Rho0, 0.3, Crr, 3, 90, 0, 0, 75, vmax=15, steps=10)
    assert len(fig.axes[0].lines) == 0
    plt.close(fig)
