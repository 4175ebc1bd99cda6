"""
Definitions and constants for complex amplitudes.
"""

from numbers import Number

import numpy as np

type Amplitude = np.complex128
"""Complex amplitude of a basis state, double-precision real and imaginary parts."""

COMPLEX_ZERO = np.complex128(0.0 + 0.0j)
"""Additive identity ``0+0i``."""
COMPLEX_ONE = np.complex128(1.0 + 0.0j)
"""Multiplicative identity ``1+0i``."""


def as_amplitude(value: complex | Number) -> Amplitude:
    """
    Coerce a Python or NumPy number to an amplitude.

    Args:
        value: int, float, complex, or NumPy numeric scalar.

    Raises:
        TypeError - ``value`` is not a number.

    Returns: ``value`` as ``complex128``.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Number, np.number)):
        raise TypeError(f"amplitude must be a number, got {type(value).__name__}")
    return np.complex128(value)


def amplitude_norm(z: Amplitude) -> float:
    """Euclidean norm ``sqrt(re**2 + im**2)`` of an amplitude."""
    return float(np.abs(z))
