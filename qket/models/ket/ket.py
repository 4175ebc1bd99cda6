#    SimQN: a discrete-event simulator for the quantum networks
#    Copyright (C) 2021-2022 Lutong Chen, Jian Li, Kaiping Xue
#    University of Science and Technology of China, USTC.
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.

from numbers import Number
from typing import Protocol, final, runtime_checkable

import numpy as np

from qket.models.core import ULPS, Amplitude, amplitude_norm, approx_eq, as_amplitude
from qket.utils import log

type Scalar = complex | Number
"""Anything accepted as a scalar factor or as an amplitude."""


@runtime_checkable
class ValidQuantumState(Protocol):
    """Capability of checking the physical validity of a quantum state."""

    def is_valid(self) -> bool: ...


@final
class Ket:
    """
    Single-qubit state vector ``first|0> + second|1>``.

    A Ket is an immutable value. Arithmetic returns new instances and never
    enforces normalization; use ``is_valid`` to check it.
    """

    __slots__ = ("_first", "_second")

    # NumPy scalars must defer to Ket.__rmul__.
    __array_ufunc__ = None

    def __init__(self, first: Scalar, second: Scalar):
        """
        Construct Ket from its two amplitudes.

        Args:
            first: amplitude of ``|0>``.
            second: amplitude of ``|1>``.

        Raises:
            TypeError - an amplitude is not a number.
        """
        object.__setattr__(self, "_first", as_amplitude(first))
        object.__setattr__(self, "_second", as_amplitude(second))

    @staticmethod
    def from_array(arr: np.ndarray | list[complex]) -> "Ket":
        """
        Construct Ket from a state vector.

        Args:
            arr: two amplitudes, shape ``(2,)`` or ``(2, 1)``.

        Raises:
            ValueError - wrong shape.
        """
        a = np.asarray(arr, dtype=np.complex128)
        if a.shape not in ((2,), (2, 1)):
            log.debug("rejected state vector of shape %s", a.shape)
            raise ValueError(f"expected shape (2,) or (2, 1), got {a.shape}")
        a = a.reshape(2)
        return Ket(a[0], a[1])

    @property
    def first(self) -> Amplitude:
        """Amplitude of ``|0>``."""
        return self._first

    @property
    def second(self) -> Amplitude:
        """Amplitude of ``|1>``."""
        return self._second

    def to_array(self) -> np.ndarray:
        """Return a ``(2, 1)`` column vector."""
        return np.array([[self._first], [self._second]], dtype=np.complex128)

    def norm2(self) -> float:
        """Sum of squared amplitude norms."""
        a = amplitude_norm(self._first)
        b = amplitude_norm(self._second)
        return (a * a) + (b * b)

    def is_valid(self) -> bool:
        """
        Determine whether this is a valid quantum state.

        The squared norms of the amplitudes must sum to 1, allowing only
        ``ULPS`` units of floating-point rounding.
        """
        return approx_eq(self.norm2(), 1.0, ulps=ULPS)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Ket is immutable, cannot set {name}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Ket is immutable, cannot delete {name}")

    def __eq__(self, other: object) -> bool:
        """
        Equality comparison operator.

        Both amplitudes are compared exactly, without tolerance.
        """
        if type(other) is not Ket:
            return NotImplemented
        return bool(self._first == other._first and self._second == other._second)

    def __ne__(self, other: object) -> bool:
        if type(other) is not Ket:
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        return hash((complex(self._first), complex(self._second)))

    def __add__(self, other: "Ket") -> "Ket":
        """Componentwise addition."""
        if type(other) is not Ket:
            return NotImplemented
        return Ket(self._first + other._first, self._second + other._second)

    def __mul__(self, scalar: Scalar) -> "Ket":
        """Multiply both amplitudes by a complex scalar."""
        try:
            c = as_amplitude(scalar)
        except TypeError:
            return NotImplemented
        return Ket(self._first * c, self._second * c)

    def __rmul__(self, scalar: Scalar) -> "Ket":
        try:
            c = as_amplitude(scalar)
        except TypeError:
            return NotImplemented
        return Ket(c * self._first, c * self._second)

    def __repr__(self) -> str:
        return f"Ket(first={complex(self._first)!r}, second={complex(self._second)!r})"


def equals(a: Ket, b: Ket) -> bool:
    """Compare two kets exactly."""
    return a == b


def add(a: Ket, b: Ket) -> Ket:
    """Add two kets componentwise."""
    return a + b


def scale(x: Ket | Scalar, y: Ket | Scalar) -> Ket:
    """
    Multiply a ket by a complex scalar.

    The scalar may be given on either side: ``scale(ket, c)`` and ``scale(c, ket)``
    compute the same thing.

    Raises:
        TypeError - not exactly one of the arguments is a Ket.
    """
    if type(x) is Ket and type(y) is not Ket:
        return x * as_amplitude(y)
    if type(y) is Ket and type(x) is not Ket:
        return as_amplitude(x) * y
    raise TypeError("scale requires one Ket and one scalar")


def is_valid(state: ValidQuantumState) -> bool:
    """Determine whether ``state`` is a valid quantum state."""
    return state.is_valid()


def check_ket(ket: Ket) -> Ket:
    """
    Validate that ``ket`` is a valid quantum state.

    Raises:
        AssertionError - ``ket`` is not normalized.

    Returns: Validated input.
    """
    if not ket.is_valid():
        log.debug("rejected %r with norm2=%r", ket, ket.norm2())
        raise AssertionError(f"{ket!r} is not a valid quantum state")
    return ket
