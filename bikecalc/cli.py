# -*- coding: utf-8 -*-
"""
Calculate either the power required or the time achievable for a ride.
"""
import argparse
import logging
import re
import sys

from bikecalc import atmosphere
from bikecalc.bike_model import Bike, ground_velocity, air_velocity
from bikecalc.calculator import components, duration
from bikecalc.constants import STANDARD, Rho0, Crr
from bikecalc.plot import plot_power_curve, show
from bikecalc.rider_model import Rider
from bikecalc.utils import setup_logger, fmt_duration

logger = logging.getLogger(__name__)

# cardinal direction to degrees
COMPASS = {
    "N": 0,
    "NNE": 22.5,
    "NE": 45,
    "ENE": 67.5,
    "E": 90,
    "ESE": 112.5,
    "SE": 135,
    "SSE": 157.5,
    "S": 180,
    "SSW": 202.5,
    "SW": 225,
    "WSW": 247.5,
    "W": 270,
    "WNW": 292.5,
    "NW": 315,
    "NNW": 337.5,
}


def parse_direction(v):
    d = COMPASS.get(v.upper())
    if d is not None:
        return float(d)
    try:
        return float(v)
    except ValueError:
        raise ValueError("invalid direction '{}'".format(v))


def parse_duration(v):
    """
    '12m34s', '1h2m3s', '1:02:03', '12:34' or plain seconds
    """
    try:
        return float(v)
    except ValueError:
        pass

    if ':' in v:
        parts = v.split(':')
        if len(parts) <= 3 and all(p.isdigit() for p in parts):
            seconds = 0
            for p in parts:
                seconds = seconds * 60 + int(p)
            return float(seconds)

    m = re.fullmatch(r'(?:(\d+(?:\.\d+)?)h)?(?:(\d+(?:\.\d+)?)m)?(?:(\d+(?:\.\d+)?)s)?', v)
    if m and any(m.groups()):
        h, mins, s = (float(x) if x else 0.0 for x in m.groups())
        return h * 3600 + mins * 60 + s
    raise ValueError("invalid duration '{}'".format(v))


def build_parser():
    parser = argparse.ArgumentParser(prog='bikecalc', description=__doc__.strip())
    parser.add_argument('--rho', type=float, default=Rho0, help="air density in kg/m*3")
    parser.add_argument('--cda', type=float, default=0.325, help="coefficient of drag area")
    parser.add_argument('--crr', type=float, default=Crr, help="coefficient of rolling resistance")

    parser.add_argument('--mr', type=float, default=67.0, help="total mass of the rider in kg")
    parser.add_argument('--mb', type=float, default=8.0, help="total mass of the bicycle in kg")
    parser.add_argument('--tire', type=int, default=23, help="the tire width in mm")

    parser.add_argument('--vw', type=float, default=0.0, help="the wind speed in m/s")
    parser.add_argument('--dw', default="N", help="the cardinal direction the wind originates from")
    parser.add_argument('--db', default="N", help="the cardinal direction the bicycle is travelling")

    parser.add_argument('--e', type=float, default=0.0, help="total elevation gained in m")
    parser.add_argument('--gr', type=float, default=0.0, help="average grade")
    parser.add_argument('--h', type=float, default=0.0, help="median elevation")

    parser.add_argument('--d', type=float, default=-1, help="distance travelled in m")
    parser.add_argument('--p', type=float, default=None, help="power in watts")
    parser.add_argument('--t', default=None, help="duration ('12m34s', '1:02:03' or seconds)")

    parser.add_argument('--plot', action='store_true', help="show the power curve")
    parser.add_argument('--verbose', '-v', action='store_true', help="debug logging")
    return parser


def verify(name, x):
    if x < 0:
        raise ValueError("{} must be non negative but was {:f}".format(name, x))


def resolve(args):
    """
    Validate the arguments and turn them into model inputs
    """
    for name in ('rho', 'cda', 'crr', 'mr', 'mb', 'vw', 'h'):
        verify(name, getattr(args, name))

    rider = Rider(weight=args.mr)
    bike = Bike(weight=args.mb, tire_width=args.tire, crr=args.crr)
    rider.ride_on(bike)

    dw = parse_direction(args.dw)
    db = parse_direction(args.db)

    rho = args.rho
    if args.h != 0:
        r = atmosphere.rho(args.h, c=STANDARD)
        # if both are specified, make sure they agree
        if rho != Rho0 and r != rho:
            raise ValueError("specified both rho={:f} and h={:f} but they do not agree".format(rho, args.h))
        rho = r

    # grade passed in as a %
    gr = args.gr
    if gr > 1 or gr < -1:
        gr = gr / 100

    d = args.d
    if d <= 0:
        raise ValueError("d must be positive but was {:f}".format(d))

    if args.e > 0:
        if gr > 0 and (d * gr != args.e or args.e / d != gr):
            raise ValueError("specified both e={:f} and gr={:f} but they do not agree".format(args.e, gr))
        gr = args.e / d

    if args.p is None and args.t is None:
        raise ValueError("p or t must be specified")
    if args.p is not None and args.t is not None:
        raise ValueError("t and p can't both be provided")

    t = None
    if args.t is not None:
        t = parse_duration(args.t)
        if t <= 0:
            raise ValueError("t must be positive but was {:f}".format(t))
    if args.p is not None:
        verify('p', args.p)

    return dict(rider=rider, bike=bike, rho=rho, cda=args.cda, crr=bike.crr, vw=args.vw,
                dw=dw, db=db, gr=gr, mt=bike.total_weight, d=d, p=args.p, t=t)


def time_for_power(m, tty):
    # whole seconds
    t = int(duration(m['p'], m['d'], m['rho'], m['cda'], m['crr'], m['vw'], m['dw'], m['db'], m['gr'], m['mt']))
    if not tty:
        return "{}".format(t)
    return "{:.2f} km @ {:.2f}% @ {:.2f} W ({:.2f} W/kg) = {}".format(
        m['d'] / 1000, m['gr'] * 100, m['p'], m['rider'].watts_per_kg(m['p']), fmt_duration(t))


def power_for_time(m, tty):
    t = m['t']
    vg = ground_velocity(m['d'], t)
    va = air_velocity(vg, m['vw'], m['dw'], m['db'])
    comp = components(m['rho'], m['cda'], m['crr'], va, vg, m['gr'], m['mt'],
                      m['bike'].tire_r, vg, vg, 0, t)
    if not tty:
        return "{}".format(comp.total)
    return "{} ({:.2f} km @ {:.2f}%) = {:.2f} W ({:.2f} W/kg) = " \
           "AT:{:.2f} W + RR:{:.2f} W + WB:{:.2f} W + PE:{:.2f} W".format(
               fmt_duration(t), m['d'] / 1000, m['gr'] * 100, comp.total,
               m['rider'].watts_per_kg(comp.total), comp.at, comp.rr, comp.wb, comp.pe)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    # stdout only carries the result
    setup_logger(level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        m = resolve(args)
    except ValueError as e:
        print(e, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1
    logger.debug("inputs: %s", {k: v for k, v in m.items() if k not in ('rider', 'bike')})

    tty = sys.stdout.isatty()
    if m['p'] is not None:
        print(time_for_power(m, tty))
    else:
        print(power_for_time(m, tty))

    if args.plot:
        plot_power_curve(m['rho'], m['cda'], m['crr'], m['vw'], m['dw'], m['db'], m['gr'], m['mt'],
                         target=m['p'])
        show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
