import pytest

from trifem.elements import (
    P0,
    P1,
    P2,
    ElementType,
    create_element,
    create_triangle_border_nodes,
)
from trifem.point import Point

ALL_TYPES = [ElementType.P0, ElementType.P1, ElementType.P2]
SAMPLE_POINTS = [(0.1, 0.2), (0.5, 0.25), (0.0, 0.9), (1 / 3, 1 / 3)]


@pytest.mark.parametrize("element_type", ALL_TYPES)
def test_factory_returns_matching_type(element_type):
    elem = create_element(element_type)
    assert elem.element_type is element_type


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        create_element("P3")


@pytest.mark.parametrize("element_type", ALL_TYPES)
def test_dof_matches_node_count(element_type):
    elem = create_element(element_type)
    assert elem.dof == len(elem.nodes)


@pytest.mark.parametrize("element_type", ALL_TYPES)
def test_shape_functions_are_kronecker_at_nodes(element_type):
    elem = create_element(element_type)
    for i, node in enumerate(elem.nodes):
        vals = elem.shape(node.x, node.y)
        for k, v in enumerate(vals):
            assert v == pytest.approx(1.0 if k == i else 0.0, abs=1e-6)


@pytest.mark.parametrize("element_type", ALL_TYPES)
@pytest.mark.parametrize("x, y", SAMPLE_POINTS)
def test_partition_of_unity(element_type, x, y):
    elem = create_element(element_type)
    assert sum(elem.shape(x, y)) == pytest.approx(1.0)


@pytest.mark.parametrize("element_type", ALL_TYPES)
@pytest.mark.parametrize("x, y", SAMPLE_POINTS)
def test_gradients_sum_to_zero(element_type, x, y):
    gx, gy = create_element(element_type).grad(x, y)
    assert sum(gx) == pytest.approx(0.0, abs=1e-12)
    assert sum(gy) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("element_type", ALL_TYPES)
@pytest.mark.parametrize("x, y", SAMPLE_POINTS)
def test_gradient_matches_finite_difference(element_type, x, y):
    elem = create_element(element_type)
    h = 1e-6
    gx, gy = elem.grad(x, y)
    fx = [(a - b) / (2 * h) for a, b in zip(elem.shape(x + h, y), elem.shape(x - h, y))]
    fy = [(a - b) / (2 * h) for a, b in zip(elem.shape(x, y + h), elem.shape(x, y - h))]
    assert list(gx) == pytest.approx(fx, abs=1e-5)
    assert list(gy) == pytest.approx(fy, abs=1e-5)


@pytest.mark.parametrize("element_type", ALL_TYPES)
def test_value_at_nodes_returns_node_value(element_type):
    elem = create_element(element_type)
    values = [float(i + 2) for i in range(elem.dof)]
    for node, v in zip(elem.nodes, values):
        assert elem.value(node.x, node.y, values) == pytest.approx(v)


@pytest.mark.parametrize("cls", [P1, P2])
@pytest.mark.parametrize("x, y", SAMPLE_POINTS)
def test_linear_function_is_reproduced(cls, x, y):
    elem = cls()

    def f(px, py):
        return 2.0 * px - 3.0 * py + 0.5

    values = [f(n.x, n.y) for n in elem.nodes]
    assert elem.value(x, y, values) == pytest.approx(f(x, y))


@pytest.mark.parametrize("x, y", SAMPLE_POINTS)
def test_p2_reproduces_quadratic(x, y):
    elem = P2()

    def f(px, py):
        return px * px + px * py - py * py + px

    values = [f(n.x, n.y) for n in elem.nodes]
    assert elem.value(x, y, values) == pytest.approx(f(x, y))


def test_p0_node_is_centroid_and_internal():
    elem = P0()
    assert elem.nodes == (Point(1.0 / 3, 1.0 / 3),)
    assert elem.internal_nodes == elem.nodes


def test_p1_nodes_are_reference_corners():
    assert P1().nodes == (Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
    assert P1().internal_nodes == ()


def test_p2_nodes_are_corners_and_midpoints():
    assert P2().nodes == (
        Point(0.0, 0.0),
        Point(0.5, 0.0),
        Point(1.0, 0.0),
        Point(0.5, 0.5),
        Point(0.0, 1.0),
        Point(0.0, 0.5),
    )


def test_border_nodes_rejects_one_point_per_side():
    with pytest.raises(ValueError):
        create_triangle_border_nodes(1)


def test_border_nodes_empty_below_two():
    assert create_triangle_border_nodes(0) == []


@pytest.mark.parametrize("pts_per_side", [2, 3, 4, 6])
def test_border_nodes_count_and_corners(pts_per_side):
    nodes = create_triangle_border_nodes(pts_per_side)
    step = pts_per_side - 1
    assert len(nodes) == 3 * step
    assert nodes[0] == Point(0.0, 0.0)
    assert nodes[step] == Point(1.0, 0.0)
    assert nodes[2 * step] == Point(0.0, 1.0)


@pytest.mark.parametrize("pts_per_side", [3, 4, 6])
def test_border_nodes_lie_on_border(pts_per_side):
    for n in create_triangle_border_nodes(pts_per_side):
        assert n.x >= -1e-12 and n.y >= -1e-12 and n.x + n.y <= 1 + 1e-12
        on_edge = (
            abs(n.x) < 1e-12 or abs(n.y) < 1e-12 or abs(n.x + n.y - 1) < 1e-12
        )
        assert on_edge


@pytest.mark.parametrize("pts_per_side", [3, 4, 6])
def test_border_nodes_are_distinct(pts_per_side):
    nodes = create_triangle_border_nodes(pts_per_side)
    assert len(set(nodes)) == len(nodes)