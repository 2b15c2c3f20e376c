# -*- coding: utf-8 -*-
from collections import namedtuple


class Components(namedtuple('Components', 'at rr wb pe ke')):
    """
    Power split into its sources, each already divided by drive chain efficiency
    """
    __slots__ = ()

    @property
    def total(self):
        return self.at + self.rr + self.wb + self.pe + self.ke


# Result of the velocity search
Solution = namedtuple('Solution', 'vg power iterations converged')
