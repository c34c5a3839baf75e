"""Sample functions and self-checks used when trying out elements and meshes."""

from __future__ import annotations

import math

from trifem.elements import ElementType, create_element

_SHAPE_EPS = 1e-6


def wave_function(x: float, y: float) -> float:
    """Gaussian envelope around (1, 0.2) modulated by sin(20 x) squared."""
    ox, oy, k = 1.0, 0.2, 1.0
    dx = x - ox
    dy = y - oy
    s = math.sin(x * 20)
    return math.exp(-k * (dx * dx + dy * dy)) * s * s


def gaussian_bump(x: float, y: float) -> float:
    """Gaussian bump exp(-3 r^2) centred on (1, 0.2)."""
    ox, oy, k = 1.0, 0.2, 3.0
    dx = x - ox
    dy = y - oy
    return math.exp(-k * (dx * dx + dy * dy))


def check_shape_functions(element_type: ElementType) -> list[tuple[int, int, float, float]]:
    """Check that every shape function is 1 at its own node and 0 at the others.

    Returns the failures as ``(node_index, shape_index, expected, actual)``
    tuples; an empty list means the element is consistent. Raises ValueError
    when the number of nodes differs from the degrees of freedom.
    """
    element = create_element(element_type)
    nodes = element.nodes
    if len(nodes) != element.dof:
        raise ValueError(
            f"check_shape_functions: {len(nodes)} nodes but {element.dof} degrees of freedom"
        )

    failures: list[tuple[int, int, float, float]] = []
    for i, node in enumerate(nodes):
        for k, actual in enumerate(element.shape(node.x, node.y)):
            expected = 1.0 if k == i else 0.0
            if abs(actual - expected) > _SHAPE_EPS:
                failures.append((i, k, expected, actual))
    return failures