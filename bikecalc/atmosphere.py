# -*- coding: utf-8 -*-
from math import exp

from bikecalc.constants import STANDARD


def air_pressure(h, t, c=STANDARD):
    """
    Barometric formula: air pressure in Pa at altitude h (m) where the
    temperature is t (Celsius)
    """
    return c.p0 * exp((-c.g * c.m * h) / (c.r * (t + c.k)))


def rho(h, g=None, c=STANDARD):
    """
    Air density at altitude h (m) from the ideal gas law, with the
    temperature following the troposphere lapse rate.
    g defaults to c.g.
    """
    if g is None:
        g = c.g
    t = c.t0 - c.l * h
    p = c.p0 * pow(1 - (c.l * h) / c.t0, (g * c.m) / (c.r * c.l))
    return (p * c.m) / (c.r * t)


def altitude_adjust(p, h):
    """
    Sustainable power at altitude h (m) for a sea level power p.
    Clark et al, "The effect of acute simulated moderate altitude on power,
    performance and pacing strategies in well-trained cyclists"
    """
    x = h / 1000
    return p * (-0.0092 * x ** 2 - 0.0323 * x + 1)
