"""Lagrange finite elements on the reference triangle (0,0), (1,0), (0,1)."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Sequence

from trifem.point import Point


class ElementType(enum.Enum):
    P0 = "P0"
    P1 = "P1"
    P2 = "P2"


def create_triangle_border_nodes(pts_per_side: int) -> list[Point]:
    """Nodes on the border of the reference triangle, counter-clockwise from (0,0).

    Each side holds ``pts_per_side`` nodes including its corners. Fewer than
    two points per side give no border nodes; exactly one is not supported.
    """
    if pts_per_side == 1:
        raise ValueError("One point per side (nonconforming element) is not supported")
    if pts_per_side < 2:
        return []

    extra = pts_per_side - 2
    side_step = pts_per_side - 1
    corners = (Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
    h = 1.0 / (extra + 1)

    result: list[Point] = []
    for corner, a in enumerate(corners):
        b = corners[(corner + 1) % 3]
        result.append(a)
        for k in range(1, extra + 1):
            w = k * h
            comp = 1.0 - w
            result.append(Point(w * a.x + comp * b.x, w * a.y + comp * b.y))
    assert len(result) == 3 * side_step
    return result


class Element(ABC):
    """A triangular element defined on the reference triangle."""

    element_type: ElementType
    pts_per_side: int
    dof: int
    nodes: tuple[Point, ...]
    internal_nodes: tuple[Point, ...]

    @abstractmethod
    def shape(self, x: float, y: float) -> tuple[float, ...]:
        """Values of all shape functions at (x, y)."""

    @abstractmethod
    def grad(self, x: float, y: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
        """Partial derivatives (d/dx, d/dy) of all shape functions at (x, y)."""

    def value(self, x: float, y: float, node_values: Sequence[float]) -> float:
        """Value at (x, y) of the function with the given nodal values."""
        return sum(s * v for s, v in zip(self.shape(x, y), node_values))


class P0(Element):
    """Piecewise constant element with a single node at the centroid."""

    element_type = ElementType.P0
    pts_per_side = 0
    dof = 1
    nodes = (Point(1.0 / 3, 1.0 / 3),)
    internal_nodes = nodes

    def shape(self, x: float, y: float) -> tuple[float, ...]:
        return (1.0,)

    def grad(self, x: float, y: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
        return (0.0,), (0.0,)

    def value(self, x: float, y: float, node_values: Sequence[float]) -> float:
        return node_values[0]


class P1(Element):
    """Linear element with nodes at the corners."""

    element_type = ElementType.P1
    pts_per_side = 2
    dof = 3
    nodes = tuple(create_triangle_border_nodes(2))
    internal_nodes = ()

    def shape(self, x: float, y: float) -> tuple[float, ...]:
        return (1 - x - y, x, y)

    def grad(self, x: float, y: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
        return (-1.0, 1.0, 0.0), (-1.0, 0.0, 1.0)


class P2(Element):
    """Quadratic element with nodes at the corners and side midpoints."""

    element_type = ElementType.P2
    pts_per_side = 3
    dof = 6
    nodes = tuple(create_triangle_border_nodes(3))
    internal_nodes = ()

    def shape(self, x: float, y: float) -> tuple[float, ...]:
        x2 = x * x
        y2 = y * y
        xy = x * y
        return (
            1 - 3 * x - 3 * y + 2 * x2 + 2 * y2 + 4 * xy,
            4 * x - 4 * x2 - 4 * xy,
            -x + 2 * x2,
            4 * xy,
            -y + 2 * y2,
            4 * y - 4 * y2 - 4 * xy,
        )

    def grad(self, x: float, y: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
        gx = (
            -3 + 4 * x + 4 * y,
            4 - 8 * x - 4 * y,
            -1 + 4 * x,
            4 * y,
            0.0,
            -4 * y,
        )
        gy = (
            -3 + 4 * y + 4 * x,
            -4 * x,
            0.0,
            4 * x,
            -1 + 4 * y,
            4 - 8 * y - 4 * x,
        )
        return gx, gy


_ELEMENTS: dict[ElementType, type[Element]] = {
    ElementType.P0: P0,
    ElementType.P1: P1,
    ElementType.P2: P2,
}


def create_element(element_type: ElementType) -> Element:
    """Create an element of the given type."""
    try:
        cls = _ELEMENTS[element_type]
    except (KeyError, TypeError):
        raise ValueError(f"Invalid element type: {element_type!r}") from None
    return cls()