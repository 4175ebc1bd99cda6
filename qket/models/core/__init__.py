from qket.models.core.amplitude import COMPLEX_ONE, COMPLEX_ZERO, Amplitude, amplitude_norm, as_amplitude
from qket.models.core.tolerance import ULPS, approx_eq, ulps_distance

__all__ = [
    "COMPLEX_ONE",
    "COMPLEX_ZERO",
    "ULPS",
    "Amplitude",
    "amplitude_norm",
    "approx_eq",
    "as_amplitude",
    "ulps_distance",
]
