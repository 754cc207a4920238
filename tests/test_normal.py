import math

import pytest

from deltahedge.normal import std_normal_cdf


def _exact_cdf(x):
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.96, 2.5, 4.0])
def test_cdf_is_symmetric(x):
    assert std_normal_cdf(x) + std_normal_cdf(-x) == pytest.approx(1.0, abs=1e-12)


def test_cdf_is_increasing():
    points = [i / 10 for i in range(-50, 51)]
    values = [std_normal_cdf(x) for x in points]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_cdf_stays_within_unit_interval():
    for x in (-40.0, -8.0, 8.0, 40.0):
        value = std_normal_cdf(x)
        assert 0.0 <= value <= 1.0


def test_cdf_tails():
    assert std_normal_cdf(-10.0) < 1e-12
    assert std_normal_cdf(10.0) > 1.0 - 1e-12