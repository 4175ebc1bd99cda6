import math

import numpy as np
import pytest

from qket.models.core import ULPS, approx_eq, ulps_distance


def step(x: float, n: int) -> float:
    """Move ``n`` representable doubles away from ``x``, upward if n > 0."""
    target = math.inf if n > 0 else -math.inf
    for _ in range(abs(n)):
        x = float(np.nextafter(x, target))
    return x


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, 0),
        (1, 1),
        (2, 2),
        (3, 3),
        (-1, 1),
        (-5, 5),
    ],
)
def test_ulps_distance(n: int, expected: int):
    assert ulps_distance(1.0, step(1.0, n)) == expected
    assert ulps_distance(step(1.0, n), 1.0) == expected


def test_ulps_distance_invalid():
    with pytest.raises(ValueError):
        ulps_distance(math.nan, 1.0)
    with pytest.raises(ValueError):
        ulps_distance(-1.0, 1.0)


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, True),
        (1, True),
        (2, True),
        (3, False),
        (-1, True),
        (-2, True),
        (-3, False),
    ],
)
def test_approx_eq_ulps(n: int, expected: bool):
    assert approx_eq(step(1.0, n), 1.0, ulps=ULPS) is expected


def test_approx_eq_exact_by_default():
    assert approx_eq(0.1 + 0.2, 0.3) is False
    assert approx_eq(0.1 + 0.2, 0.3, ulps=1) is True
    assert approx_eq(0.1 + 0.2, 0.3, epsilon=1e-15) is True
    assert approx_eq(1.5, 1.5) is True


def test_approx_eq_signs():
    assert approx_eq(0.0, -0.0) is True
    assert approx_eq(-1.0, 1.0, ulps=1 << 62) is False
    assert approx_eq(-1.0, 1.0, epsilon=2.0) is True


def test_approx_eq_special():
    assert approx_eq(math.nan, math.nan, ulps=ULPS) is False
    assert approx_eq(math.nan, 1.0, epsilon=math.inf) is False
    assert approx_eq(math.inf, 1.0, ulps=ULPS) is False
    assert approx_eq(math.inf, math.inf) is True
