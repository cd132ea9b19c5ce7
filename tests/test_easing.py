import math

import pytest

from plaquette import easing

GRID = [i / 20 for i in range(21)]


@pytest.mark.parametrize("t", [0.0, 0.3, 1.0])
def test_ease_none_is_identity(t):
    assert easing.ease_none(t) == t


def test_polynomial_endpoints():
    endpoints = [
        (easing.ease_in_quad(0.0), easing.ease_in_quad(1.0)),
        (easing.ease_out_quad(0.0), easing.ease_out_quad(1.0)),
        (easing.ease_in_out_quad(0.0), easing.ease_in_out_quad(1.0)),
        (easing.ease_in_cubic(0.0), easing.ease_in_cubic(1.0)),
        (easing.ease_out_cubic(0.0), easing.ease_out_cubic(1.0)),
        (easing.ease_in_quart(0.0), easing.ease_in_quart(1.0)),
        (easing.ease_out_quart(0.0), easing.ease_out_quart(1.0)),
        (easing.ease_in_out_quart(0.0), easing.ease_in_out_quart(1.0)),
        (easing.ease_in_quint(0.0), easing.ease_in_quint(1.0)),
        (easing.ease_out_quint(0.0), easing.ease_out_quint(1.0)),
        (easing.ease_in_out_quint(0.0), easing.ease_in_out_quint(1.0)),
        (easing.ease_in_back(0.0), easing.ease_in_back(1.0)),
        (easing.ease_out_back(0.0), easing.ease_out_back(1.0)),
        (easing.ease_in_out_back(0.0), easing.ease_in_out_back(1.0)),
    ]
    for start, end in endpoints:
        assert start == pytest.approx(0.0, abs=1e-5)
        assert end == pytest.approx(1.0, abs=1e-5)


@pytest.mark.parametrize(
    "func",
    [
        easing.ease_in_quad,
        easing.ease_out_quad,
        easing.ease_in_cubic,
        easing.ease_out_cubic,
        easing.ease_in_quart,
        easing.ease_out_quart,
        easing.ease_in_quint,
        easing.ease_out_quint,
        easing.ease_out_expo,
        easing.ease_out_circ,
    ],
)
def test_monotonic_increasing(func):
    values = [func(t) for t in GRID]
    assert all(a <= b + 1e-9 for a, b in zip(values, values[1:]))


def test_in_quad_matches_square():
    for t in GRID:
        assert easing.ease_in_quad(t) == pytest.approx(t * t)


def test_in_out_quad_symmetry():
    for t in GRID:
        assert easing.ease_in_out_quad(t) + easing.ease_in_out_quad(1 - t) == pytest.approx(1.0)


def test_in_sine_approximates_sine():
    for t in GRID:
        assert easing.ease_in_sine(t) == pytest.approx(math.sin(math.pi / 2 * t), abs=0.02)


def test_in_out_sine_approximates_cosine_curve():
    for t in GRID:
        expected = 0.5 * (1 - math.cos(math.pi * t))
        assert easing.ease_in_out_sine(t) == pytest.approx(expected, abs=0.02)


def test_out_circ_approximates_sqrt():
    for t in GRID[1:]:
        assert easing.ease_out_circ(t) == pytest.approx(math.sqrt(t), abs=0.02)


def test_in_circ_mirrors_out_circ():
    for t in GRID[:-1]:
        assert easing.ease_in_circ(t) == pytest.approx(1 - easing.ease_out_circ(1 - t))


def test_elastic_endpoints():
    assert easing.ease_in_elastic(0.0) == 0.0
    assert easing.ease_out_elastic(1.0) == 1.0


@pytest.mark.parametrize(
    "func", [easing.ease_in_bounce, easing.ease_out_bounce, easing.ease_in_out_bounce]
)
def test_bounce_stays_in_reasonable_range(func):
    for t in GRID:
        assert -0.1 <= func(t) <= 1.1


def test_in_bounce_non_negative():
    assert all(easing.ease_in_bounce(t) >= 0 for t in GRID)