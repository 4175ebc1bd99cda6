import math

import numpy as np
import pytest

from qket.models.core import COMPLEX_ONE, COMPLEX_ZERO, amplitude_norm, as_amplitude


def test_constants():
    assert COMPLEX_ZERO.real == 0.0 and COMPLEX_ZERO.imag == 0.0
    assert COMPLEX_ONE.real == 1.0 and COMPLEX_ONE.imag == 0.0
    assert COMPLEX_ONE * COMPLEX_ONE == COMPLEX_ONE
    assert COMPLEX_ONE + COMPLEX_ZERO == COMPLEX_ONE


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, 1 + 0j),
        (0.5, 0.5 + 0j),
        (2 - 3j, 2 - 3j),
        (np.float32(0.25), 0.25 + 0j),
        (np.complex64(1j), 1j),
    ],
)
def test_as_amplitude(value, expected: complex):
    z = as_amplitude(value)
    assert type(z) is np.complex128
    assert z == expected


@pytest.mark.parametrize("value", ["1", None, True, [1, 0], np.array([1, 0])])
def test_as_amplitude_invalid(value):
    with pytest.raises(TypeError):
        as_amplitude(value)


def test_amplitude_norm():
    assert amplitude_norm(as_amplitude(3 + 4j)) == 5.0
    assert amplitude_norm(as_amplitude(-2)) == 2.0
    assert amplitude_norm(as_amplitude(0.5 + 0.5j)) == pytest.approx(1 / math.sqrt(2))
    assert math.isnan(amplitude_norm(as_amplitude(complex(math.nan, 0))))
    assert amplitude_norm(as_amplitude(complex(math.inf, 1))) == math.inf
