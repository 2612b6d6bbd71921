# filters/fixed_point.py

import math

FRAC_BITS = 16
ONE = 1 << FRAC_BITS


def to_fixed(x: float) -> int:
    # int() truncates toward zero
    return int(x * ONE)


def div_trunc(a: int, b: int) -> int:
    """
    Integer division rounding toward zero (C semantics).
    Python's // floors, which differs for negative operands.
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


PI_FIXED = to_fixed(math.pi)
