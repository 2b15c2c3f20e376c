# -*- coding: utf-8 -*-
import logging

from bikecalc import Components, Solution
from bikecalc.bike_model import (
    p_aero, p_rolling_resistance, p_wheel_bearing, p_potential_energy, p_kinetic_energy, air_velocity
)
from bikecalc.constants import STANDARD
from bikecalc.numeric import approx_equal

logger = logging.getLogger(__name__)

# Search domain of the ground velocity, m/s
V_MIN = 0.0
V_MAX = 100.0

MAX_ITERATIONS = 100
SOLVER_EPSILON = 1e-6


def components(rho, cda, crr, va, vg, gr, mt, r, vgi, vgf, ti, tf, c=STANDARD):
    """
    Split the power required into aerodynamic drag, rolling resistance,
    wheel bearing friction, potential and kinetic energy, each divided by the
    drive chain efficiency c.ec.

    r is the tire radius, (ti, vgi) and (tf, vgf) the initial and final
    time and ground velocity. Pass vgi == vgf with tf - ti == 1 to ignore
    acceleration.
    """
    return Components(
        at=p_aero(rho, cda, c.fw, va, vg) / c.ec,
        rr=p_rolling_resistance(vg, gr, crr, mt, c.g) / c.ec,
        wb=p_wheel_bearing(vg) / c.ec,
        pe=p_potential_energy(vg, mt, c.g, gr) / c.ec,
        ke=p_kinetic_energy(mt, c.i, r, vgi, vgf, ti, tf) / c.ec,
    )


def power_tot(rho, cda, crr, va, vg, gr, mt, r, vgi, vgf, ti, tf, c=STANDARD):
    return components(rho, cda, crr, va, vg, gr, mt, r, vgi, vgf, ti, tf, c).total


def power(rho, cda, crr, va, vg, gr, mt, c=STANDARD):
    """
    Power required at a steady ground velocity vg, the kinetic energy term
    left out
    """
    return (p_aero(rho, cda, c.fw, va, vg) +
            p_rolling_resistance(vg, gr, crr, mt, c.g) +
            p_wheel_bearing(vg) +
            p_potential_energy(vg, mt, c.g, gr)) / c.ec


def solve(p, rho, cda, crr, vw, dw, db, gr, mt, c=STANDARD,
          epsilon=SOLVER_EPSILON, max_iterations=MAX_ITERATIONS):
    """
    Bisect the ground velocity in [0, 100] m/s until power() matches p.

    There is no closed form once drag, rolling resistance and gravity are
    combined. The best midpoint is returned when the budget runs out,
    with converged=False.
    """
    lo, mid, hi = V_MIN, (V_MIN + V_MAX) / 2, V_MAX
    for n in range(1, max_iterations + 1):
        # air velocity depends on the ground velocity
        va = air_velocity(mid, vw, dw, db)
        predicted = power(rho, cda, crr, va, mid, gr, mt, c)
        logger.debug("iteration %d: vg=%.9f predicted=%.6f W target=%.6f W", n, mid, predicted, p)

        if approx_equal(predicted, p, epsilon):
            return Solution(vg=mid, power=predicted, iterations=n, converged=True)

        if predicted > p:
            hi = mid
        else:
            lo = mid
        mid = (lo + hi) / 2

    predicted = power(rho, cda, crr, air_velocity(mid, vw, dw, db), mid, gr, mt, c)
    logger.debug("no convergence after %d iterations: vg=%.9f predicted=%.6f W target=%.6f W",
                 max_iterations, mid, predicted, p)
    return Solution(vg=mid, power=predicted, iterations=max_iterations, converged=False)


def velocity(p, rho, cda, crr, vw, dw, db, gr, mt, c=STANDARD):
    """
    Ground velocity (m/s) achievable with power p
    """
    return solve(p, rho, cda, crr, vw, dw, db, gr, mt, c).vg


def duration(p, d, rho, cda, crr, vw, dw, db, gr, mt, c=STANDARD):
    """
    Seconds needed to cover d metres with power p
    """
    return d / velocity(p, rho, cda, crr, vw, dw, db, gr, mt, c)


def distance(p, t, rho, cda, crr, vw, dw, db, gr, mt, c=STANDARD):
    """
    Metres covered in t seconds with power p
    """
    return velocity(p, rho, cda, crr, vw, dw, db, gr, mt, c) * t
