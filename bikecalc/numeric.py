import sys

# How precisely equal floats need to be by default
EPSILON = 1e-3

# Smallest normal double, 2.2250738585072014e-308
MIN_NORMAL = sys.float_info.min


def approx_equal(a, b, epsilon=EPSILON):
    """
    Compare floats by relative error, or by absolute difference when one of
    them is zero or both are extremely close to each other
    """
    if a == b:
        return True

    diff = abs(a - b)
    if a == 0 or b == 0 or diff < MIN_NORMAL:
        # relative error is meaningless next to zero
        return diff < epsilon * MIN_NORMAL
    return diff / (abs(a) + abs(b)) < epsilon
