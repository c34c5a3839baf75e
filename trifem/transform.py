"""Affine maps of the plane, used to map the reference triangle onto mesh triangles."""

from __future__ import annotations

from dataclasses import dataclass

from trifem.point import Point

Matrix2 = tuple[tuple[float, float], tuple[float, float]]


@dataclass(frozen=True)
class AffineTransform:
    """The map ``p -> m @ p + b``."""

    m: Matrix2
    b: tuple[float, float]

    def apply(self, point: Point) -> Point:
        """Apply the full transform, including the offset."""
        (a, c), (d, e) = self.m
        return Point(a * point.x + c * point.y + self.b[0], d * point.x + e * point.y + self.b[1])

    def apply_no_offset(self, point: Point) -> Point:
        """Apply only the linear part of the transform."""
        (a, c), (d, e) = self.m
        return Point(a * point.x + c * point.y, d * point.x + e * point.y)

    def __call__(self, point: Point) -> Point:
        return self.apply(point)

    @classmethod
    def identity(cls) -> AffineTransform:
        """The identity transform."""
        return cls(((1.0, 0.0), (0.0, 1.0)), (0.0, 0.0))


def from_ref_triangle(p0: Point, p1: Point, p2: Point) -> AffineTransform:
    """Transform mapping the reference triangle (0,0), (1,0), (0,1) onto p0, p1, p2."""
    return AffineTransform(
        ((p1.x - p0.x, p2.x - p0.x), (p1.y - p0.y, p2.y - p0.y)),
        (p0.x, p0.y),
    )


def invert(t: AffineTransform) -> AffineTransform:
    """Inverse of an affine transform.

    Raises ValueError when the linear part is singular.
    """
    (m00, m01), (m10, m11) = t.m
    determinant = m00 * m11 - m01 * m10
    if determinant == 0:
        raise ValueError("invert: determinant is 0")
    inv_det = 1.0 / determinant
    a = inv_det * m11
    b = inv_det * -m01
    c = inv_det * -m10
    d = inv_det * m00
    return AffineTransform(
        ((a, b), (c, d)),
        (-(a * t.b[0] + b * t.b[1]), -(c * t.b[0] + d * t.b[1])),
    )