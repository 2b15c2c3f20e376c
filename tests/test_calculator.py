import logging

import pytest

from bikecalc.bike_model import air_velocity
from bikecalc.calculator import components, power_tot, power, solve, velocity, duration, distance
from bikecalc.constants import STANDARD, Rho0, DropsCdA, Crr
from bikecalc.numeric import approx_equal

# Martin et al. (1998)
MARTIN = dict(rho=1.2234, cda=0.2565, crr=0.0032, va=10.91, vg=8.36, gr=0.003, mt=90,
              r=0.311, vgi=8.28, vgf=8.45, ti=0, tf=56.42)

# 4.8 km at 8.125% in the drops
CLIMB = dict(rho=Rho0, cda=DropsCdA, crr=Crr, vw=0, dw=0, db=0, gr=0.08125, mt=75)


def test_components_sum_to_total():
    comp = components(**MARTIN)
    assert comp.total == comp.at + comp.rr + comp.wb + comp.pe + comp.ke
    assert power_tot(**MARTIN) == comp.total
    assert round(comp.total) == 213


def test_components_divided_by_efficiency():
    raw = components(c=STANDARD._replace(ec=1.0), **MARTIN)
    comp = components(**MARTIN)
    for k in raw._fields:
        assert approx_equal(getattr(comp, k), getattr(raw, k) / STANDARD.ec, 1e-9)


def test_power_without_kinetic_energy():
    args = dict(MARTIN, vgi=8.36, vgf=8.36, ti=0, tf=1)
    comp = components(**args)
    assert comp.ke == 0
    expected = power(MARTIN['rho'], MARTIN['cda'], MARTIN['crr'], MARTIN['va'], MARTIN['vg'],
                     MARTIN['gr'], MARTIN['mt'])
    assert approx_equal(comp.total, expected, 1e-9)


def test_power_is_monotonic():
    for gr in (0, 0.003, 0.05, 0.2):
        powers = [power(Rho0, 0.3, Crr, v, v, gr, 75) for v in (0.5, 1, 2, 5, 10, 20, 50, 100)]
        assert powers == sorted(powers)
        assert len(set(powers)) == len(powers)


def test_velocity_for_climb():
    vg = velocity(389.9, **CLIMB)
    assert approx_equal(vg, 5.55)
    assert approx_equal(duration(389.9, 4800, **CLIMB), 864.865)


def test_distance():
    vg = velocity(389.9, **CLIMB)
    assert distance(389.9, 600, **CLIMB) == vg * 600


@pytest.mark.parametrize('p', [50, 200, 389.9, 1000])
def test_solve_round_trip(p):
    sol = solve(p, **CLIMB)
    assert sol.converged
    assert 0 < sol.vg < 100
    assert sol.iterations <= 100
    va = air_velocity(sol.vg, CLIMB['vw'], CLIMB['dw'], CLIMB['db'])
    predicted = power(CLIMB['rho'], CLIMB['cda'], CLIMB['crr'], va, sol.vg, CLIMB['gr'], CLIMB['mt'])
    assert predicted == sol.power
    assert approx_equal(predicted, p, 1e-6)


def test_solve_with_wind():
    flat = dict(CLIMB, gr=0)
    still = velocity(200, **flat)
    head = velocity(200, **dict(flat, vw=5, dw=0, db=0))
    tail = velocity(200, **dict(flat, vw=5, dw=180, db=0))
    assert head < still < tail


def test_solve_zero_power():
    # any positive power differs from zero, the bracket shrinks onto 0 m/s
    sol = solve(0, **dict(CLIMB, gr=0))
    assert not sol.converged
    assert sol.iterations == 100
    assert 0 < sol.vg < 1e-20


def test_solve_out_of_iterations():
    sol = solve(389.9, max_iterations=3, **CLIMB)
    assert not sol.converged
    assert sol.iterations == 3
    assert sol.vg == 6.25
    assert sol.power == power(Rho0, DropsCdA, Crr, 6.25, 6.25, 0.08125, 75)


def test_solve_unreachable_power(caplog):
    caplog.set_level(logging.DEBUG, logger='bikecalc.calculator')
    sol = solve(1e9, **CLIMB)
    assert not sol.converged
    assert sol.iterations == 100
    assert sol.vg > 99.9
    assert "no convergence" in caplog.text


def test_constants_table():
    ideal = STANDARD._replace(ec=1.0)
    assert approx_equal(power(Rho0, 0.3, Crr, 10, 10, 0, 75, ideal) / STANDARD.ec,
                        power(Rho0, 0.3, Crr, 10, 10, 0, 75), 1e-9)
    assert velocity(300, c=ideal, **CLIMB) > velocity(300, **CLIMB)
