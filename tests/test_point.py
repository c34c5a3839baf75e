import math

import pytest

from trifem.point import Point, distance, normalize


def test_distance_of_pythagorean_triple():
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(5.0)


def test_distance_is_symmetric():
    a = Point(1.5, -2.0)
    b = Point(-0.25, 7.0)
    assert distance(a, b) == pytest.approx(distance(b, a))


def test_distance_to_self_is_zero():
    p = Point(0.3, 0.7)
    assert distance(p, p) == 0.0


@pytest.mark.parametrize("p", [Point(3.0, 4.0), Point(-1.0, 0.5), Point(0.0, -2.0), Point(1e-3, 1e-3)])
def test_normalize_gives_unit_length(p):
    n = normalize(p)
    assert math.hypot(n.x, n.y) == pytest.approx(1.0)


def test_normalize_keeps_direction():
    p = Point(-2.0, 6.0)
    n = normalize(p)
    # cross product is zero and dot product positive
    assert p.x * n.y - p.y * n.x == pytest.approx(0.0, abs=1e-12)
    assert p.x * n.x + p.y * n.y > 0


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Point(0.0, 0.0))


def test_points_compare_by_value():
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert Point(1.0, 2.0) != Point(2.0, 1.0)