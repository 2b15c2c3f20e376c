# -*- coding: utf-8 -*-
import matplotlib.pyplot as plt

from bikecalc.bike_model import air_velocity, kmh
from bikecalc.calculator import components
from bikecalc.constants import STANDARD

LABELS = [
    ("at", "Air drag"),
    ("rr", "Rolling resistance"),
    ("wb", "Wheel bearings"),
    ("pe", "Gravity"),
]


def plot_power_curve(rho, cda, crr, vw, dw, db, gr, mt, c=STANDARD, vmax=20.0, steps=100, target=None):
    """
    Stacked power components against ground velocity (0, vmax] m/s.
    Marks the target power with a horizontal line when given.
    """
    speeds = [vmax * (n + 1) / steps for n in range(steps)]
    comps = [
        # r, vgi, vgf, ti, tf chosen so the kinetic energy term is zero
        components(rho, cda, crr, air_velocity(v, vw, dw, db), v, gr, mt, 1.0, v, v, 0, 1, c)
        for v in speeds
    ]

    fig = plt.figure(figsize=(7, 4))
    axes = fig.add_subplot(111)
    axes.stackplot(
        [kmh(v) for v in speeds],
        *[[getattr(comp, k) for comp in comps] for k, _ in LABELS],
        labels=[label for _, label in LABELS]
    )
    if target is not None:
        axes.axhline(target, color='k', linestyle='--', label="{:.0f} W".format(target))
    axes.set_xlabel("Speed (km/h)")
    axes.set_ylabel("Power (W)")
    axes.legend(loc='upper left')
    fig.tight_layout()
    return fig


def show():
    plt.show()
