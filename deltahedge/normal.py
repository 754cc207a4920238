"""Standard normal cumulative distribution function."""

import math

_A1 = 0.319381530
_A2 = -0.35653782
_A3 = 1.781477937
_A4 = -1.821255978
_A5 = 1.330274429
_B = 0.2316419
_NORMALIZER = 0.39894228  # approximately 1 / sqrt(2 * pi)


def std_normal_cdf(x: float) -> float:
    """Return P(Z <= x) for a standard normal Z, by polynomial approximation."""
    k = 1.0 / (1.0 + _B * abs(x))
    poly = k * (_A1 + k * (_A2 + k * (_A3 + k * (_A4 + k * _A5))))
    tail = _NORMALIZER * math.exp(-0.5 * x * x) * poly
    return 1.0 - tail if x > 0 else tail