import math

import pytest

from trifem.elements import ElementType
from trifem.samples import check_shape_functions, gaussian_bump, wave_function


@pytest.mark.parametrize("element_type", list(ElementType))
def test_shape_functions_are_nodal(element_type):
    assert check_shape_functions(element_type) == []


def test_check_shape_functions_rejects_invalid_type():
    with pytest.raises(ValueError):
        check_shape_functions("P3")


def test_gaussian_bump_peak_at_centre():
    assert gaussian_bump(1.0, 0.2) == pytest.approx(1.0)


@pytest.mark.parametrize("r", [0.1, 0.5, 1.0, 2.0])
def test_gaussian_bump_radially_symmetric(r):
    values = [
        gaussian_bump(1.0 + r * math.cos(a), 0.2 + r * math.sin(a))
        for a in (0.0, 1.0, 2.5, 4.0)
    ]
    assert max(values) - min(values) == pytest.approx(0.0, abs=1e-12)


def test_gaussian_bump_decreases_with_distance():
    values = [gaussian_bump(1.0 + d, 0.2) for d in (0.0, 0.1, 0.3, 0.7, 1.5)]
    assert values == sorted(values, reverse=True)
    assert all(0.0 < v <= 1.0 for v in values)


@pytest.mark.parametrize("y", [-1.0, 0.0, 0.2, 0.41, 3.0])
def test_wave_function_vanishes_at_x_zero(y):
    assert wave_function(0.0, y) == pytest.approx(0.0, abs=1e-15)


@pytest.mark.parametrize("x", [0.0, 0.3, 1.0, 1.7, 2.2])
@pytest.mark.parametrize("y", [0.0, 0.2, 0.41])
def test_wave_function_bounded_by_envelope(x, y):
    value = wave_function(x, y)
    assert 0.0 <= value <= 1.0
    assert value <= gaussian_bump(x, y) ** (1 / 3) + 1e-12


def test_wave_function_zero_at_sine_roots():
    for n in range(1, 6):
        x = n * math.pi / 20
        assert wave_function(x, 0.2) == pytest.approx(0.0, abs=1e-12)


def test_wave_function_symmetric_about_centre_line():
    for x in (0.1, 0.55, 1.3):
        for d in (0.05, 0.2, 0.6):
            assert wave_function(x, 0.2 + d) == pytest.approx(wave_function(x, 0.2 - d))