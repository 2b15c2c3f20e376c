# -*- coding: utf-8 -*-
from math import sin, cos, atan, radians, degrees

from bikecalc.constants import STANDARD, Crr


def kmh(v):
    return v * 3600 / 1000


def p_aero(rho, cda, fw, va, vg):
    """
    Power to overcome total aerodynamic drag.
    va is the air velocity (ground velocity plus the wind component along the
    direction of travel), vg the ground velocity. fw is the extra drag area
    of the spinning spokes.
    """
    # P = 0.5 x ρ x (CdA + Fw) x va^2 x vg
    return 0.5 * rho * (cda + fw) * (va ** 2) * vg


def p_rolling_resistance(vg, gr, crr, mt, g):
    """
    Rolling resistance power on a road of gradient gr (rise/run)
    """
    return vg * cos(atan(gr)) * crr * mt * g


def p_wheel_bearing(vg):
    """
    Frictional loss in the wheel bearings
    """
    # empirical, Dahn et al.
    return vg * (91 + 8.7 * vg) * 0.001


def p_potential_energy(vg, mt, g, gr):
    """
    Power spent against gravity
    """
    return vg * mt * g * sin(atan(gr))


def p_kinetic_energy(mt, i, r, vgi, vgf, ti, tf):
    """
    Power from the change in kinetic energy between (ti, vgi) and (tf, vgf).
    The wheels add an effective mass of i / r^2.
    Raises ZeroDivisionError when tf == ti.
    """
    return 0.5 * (mt + i / (r ** 2)) * (vgf ** 2 - vgi ** 2) / (tf - ti)


def air_velocity(vg, vw, dw, db):
    """
    Velocity of the air seen by the bike.
    vw is the wind speed, dw and db the wind and travel directions in degrees.
    """
    return vg + vw * cos(radians(dw) - radians(db))


def ground_velocity(d, t):
    return d / t


def yaw(va, vw, dw, db):
    """
    Yaw angle of bike and rider relative to the wind, in degrees
    """
    return degrees(atan(vw * sin(radians(dw) - radians(db)) / va))


class Bike:
    def __init__(self, weight=8.0, tire_width=23, crr=Crr, c=STANDARD):
        if tire_width not in c.radii:
            raise ValueError("invalid tire width '{}'".format(tire_width))
        self._bike_weight = weight
        self._tire_width = tire_width
        self._tire_r = c.radii[tire_width]
        self._crr = crr
        self._m = weight  # total mass of bike and rider

    @property
    def tire_r(self):
        return self._tire_r

    @property
    def crr(self):
        return self._crr

    @property
    def weight(self):
        return self._bike_weight

    @property
    def total_weight(self):
        return self._m

    def set_rider(self, rider):
        self._m = self._bike_weight + rider.weight

    def __str__(self):
        return "700x{}c {}kg".format(self._tire_width, self._bike_weight)
