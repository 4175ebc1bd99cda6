"""
Approximate floating-point comparison measured in units in the last place.

This is deliberately separate from ``Ket.__eq__``, which compares exactly.
"""

import math

import numpy as np

ULPS = 2
"""ULP bound used by the quantum state validity predicate."""


def _bits(x: float) -> int:
    return int(np.float64(x).view(np.int64))


def ulps_distance(a: float, b: float) -> int:
    """
    Count representable doubles between ``a`` and ``b``.

    Args:
        a: finite float.
        b: finite float with the same sign as ``a``.

    Raises:
        ValueError - either value is NaN, or they have different signs.
    """
    if math.isnan(a) or math.isnan(b):
        raise ValueError("cannot measure ULP distance of NaN")
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        raise ValueError("cannot measure ULP distance across signs")
    return abs(_bits(a) - _bits(b))


def approx_eq(a: float, b: float, *, epsilon: float = 0.0, ulps: int = 0) -> bool:
    """
    Compare two floats with an absolute margin and a ULP margin.

    Args:
        a: first value.
        b: second value.
        epsilon: absolute margin, ``|a-b| <= epsilon`` is accepted.
        ulps: ULP margin, accepted when ``a`` and ``b`` have the same sign.

    Returns: True if either margin is satisfied. NaN never compares equal.
    """
    if a == b:
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    if abs(a - b) <= epsilon:
        return True
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    return ulps_distance(a, b) <= ulps
