from bikecalc.constants import STANDARD


def frontal_area(h, m, a, b):
    """
    Estimated frontal area of a rider of height h (m) and mass m (kg), zero yaw.
    a and b depend on the riding position.
    """
    return a * pow(h, 0.725) * pow(m, 0.425) + b


def drops_area(h, m, c=STANDARD):
    return position_area(h, m, 'drops', c)


def aero_area(h, m, c=STANDARD):
    return position_area(h, m, 'aero', c)


def drops_cda(h, m, c=STANDARD):
    return position_cda(h, m, 'drops', c)


def aero_cda(h, m, c=STANDARD):
    return position_cda(h, m, 'aero', c)


def position_area(h, m, position, c=STANDARD):
    prop = c.positions[position]
    return frontal_area(h, m, prop.a, prop.b)


def position_cda(h, m, position, c=STANDARD):
    # Cd x A
    return c.positions[position].cd * position_area(h, m, position, c)


class Rider:
    def __init__(self, weight=67.0, height=1.75, c=STANDARD):
        self.name = "base rider"
        self.height = height
        self.weight = weight
        self.bike = None
        self._c = c

    def ride_on(self, bike):
        self.bike = bike
        self.bike.set_rider(self)

    def frontal_area(self, position='drops'):
        return position_area(self.height, self.weight, position, self._c)

    def cda(self, position='drops'):
        return position_cda(self.height, self.weight, position, self._c)

    def watts_per_kg(self, power):
        return power / self.weight
