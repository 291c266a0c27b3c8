import math

import pytest

from surfscore.wind import ALPHA, wind_at_2m, wind_at_height


def test_zero_wind_stays_zero():
    assert wind_at_2m(0) == 0


def test_negative_and_non_finite_clamp_to_zero():
    assert wind_at_2m(-12.0) == 0
    assert wind_at_2m(float("nan")) == 0
    assert wind_at_2m(float("-inf")) == 0


def test_power_law_value():
    assert wind_at_2m(20.0) == pytest.approx(20.0 * (2.0 / 10.0) ** ALPHA)


def test_monotonic_and_attenuated():
    speeds = [0.0, 0.5, 1.0, 5.0, 8.0, 12.5, 30.0, 60.0, 120.0]
    near = [wind_at_2m(v) for v in speeds]
    assert near == sorted(near)
    for v, n in zip(speeds, near):
        assert n <= v


def test_reference_height_is_identity():
    assert wind_at_height(15.0, 10.0) == 15.0
    # Heights above the reference are capped, never amplified
    assert wind_at_height(15.0, 50.0) == 15.0


def test_lower_heights_are_slower():
    assert wind_at_height(20.0, 1.0) < wind_at_height(20.0, 2.0) < wind_at_height(20.0, 5.0)
    assert math.isfinite(wind_at_height(20.0, 0.5))
