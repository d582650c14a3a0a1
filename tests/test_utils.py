import math

import pytest

from swerve_input.utils import (
    cutoff,
    normalize_degrees,
    normalize_radians,
    stick_bearing_degrees,
    stick_bearing_radians,
    stick_magnitude,
)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0.0, -1.0, 0.0),    # forward
        (1.0, 0.0, 90.0),    # right
        (0.0, 1.0, 180.0),   # back
        (-1.0, 0.0, 270.0),  # left
        (0.5, -0.5, 45.0),
    ],
)
def test_bearing_is_clockwise_from_forward(x, y, expected):
    assert stick_bearing_degrees(x, y) == pytest.approx(expected)


def test_centred_stick_has_zero_bearing():
    assert stick_bearing_degrees(0.0, 0.0) == 0.0
    assert stick_bearing_radians(0.0, 0.0) == 0.0
    assert stick_bearing_degrees(0.0, -0.0) == 0.0


def test_bearing_radians_matches_degrees():
    assert stick_bearing_radians(-1.0, 0.0) == pytest.approx(3 * math.pi / 2)
    assert stick_bearing_radians(0.3, 0.7) == pytest.approx(math.radians(stick_bearing_degrees(0.3, 0.7)))


def test_normalize_wraps_into_range():
    assert normalize_degrees(-90.0) == pytest.approx(270.0)
    assert normalize_degrees(360.0) == 0.0
    assert normalize_degrees(-1e-20) == 0.0
    assert normalize_radians(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert normalize_radians(-1e-20) == 0.0
    assert 0.0 <= normalize_radians(math.tau) < math.tau


def test_cutoff_is_hard_and_signed():
    assert cutoff(0.1799, 0.18) == 0.0
    assert cutoff(0.18, 0.18) == 0.18
    assert cutoff(0.5, 0.18) == 0.5
    assert cutoff(-0.9, 0.18) == 0.0


def test_stick_magnitude():
    assert stick_magnitude(0.6, 0.8) == pytest.approx(1.0)
    assert stick_magnitude(0.0, 0.0) == 0.0
