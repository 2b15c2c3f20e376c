# -*- coding: utf-8 -*-
from collections import namedtuple
from types import MappingProxyType

from scipy.constants import g, atm, zero_Celsius

# Gravity
G = g  # 9.80665 m/s^2

# Drivetrain and bearing loss
# https://www.cyclingpowerlab.com/DrivetrainEfficiency.aspx
# Chain, pedals, BB and derailleur together
Ec = 0.976

# Incremental drag area of the spokes, m^2
Fw = 0.0044

# Moment of inertia of both wheels, kg m^2
I = 0.14

# Rolling resistance coeeficient
# P = Crr x N x v
# See https://en.wikipedia.org/wiki/Rolling_resistance
Crr = 0.004  # smooth asphalt

# Tire radius by width (mm) for 700c wheels, m
RADII = {
    20: 0.331,
    22: 0.333,
    23: 0.334,
    25: 0.336,
    28: 0.339,
}

# Air drag, CdA in m^2
# P = 0.5 x ρ x v^2 x CdA
TopsCdA = 0.400
HoodsCdA = 0.350  # 0.3240
DropsCdA = 0.310  # 0.3070, 0.3019
RoadAeroCdA = 0.290  # 0.2914, 0.2662
TTAeroCdA = 0.270  # 0.2680, 0.2427 (0.2323 w/ Aero Helmet)

# Drag coefficient and frontal area constants (a, b) by position
# A = a x h^0.725 x m^0.425 + b
Position = namedtuple('Position', 'cd a b')

POSITIONS = {
    'drops': Position(cd=0.88, a=0.0276, b=0.1647),
    'aero': Position(cd=0.70, a=0.0293, b=0.0604),
}

# Atmosphere
Rho0 = 1.225  # kg/m^3, dry air at sea level and T0
T0 = 288.15  # K
P0 = atm  # 101325 Pa
M = 0.0289644  # molar mass of air, kg/mol
R = 8.31432  # gas constant of the US standard atmosphere, J/(mol K)
K = zero_Celsius  # 273.15
L = 0.0065  # temperature lapse rate in the troposphere, K/m

# Everything the formulas need besides their inputs. Pass a modified copy
# (STANDARD._replace(...)) to change any of them.
Constants = namedtuple('Constants', 'g ec fw i p0 m r k t0 l radii positions')

STANDARD = Constants(
    g=G, ec=Ec, fw=Fw, i=I,
    p0=P0, m=M, r=R, k=K, t0=T0, l=L,
    radii=MappingProxyType(RADII),
    positions=MappingProxyType(POSITIONS),
)
