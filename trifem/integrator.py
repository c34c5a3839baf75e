"""Numerical integration of local finite element matrices and vectors on triangles."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from trifem.elements import Element
from trifem.point import Point
from trifem.transform import AffineTransform

Matrix2 = tuple[tuple[float, float], tuple[float, float]]


@dataclass(frozen=True)
class IntegrationPoint:
    """A quadrature node (x, y) with weight w."""

    x: float
    y: float
    w: float


_TRIANGLE_RULES: dict[int, tuple[IntegrationPoint, ...]] = {
    2: (
        IntegrationPoint(5.00000000000000000000000000000000e-01, 5.00000000000000000000000000000000e-01, 1.66666666666666657414808128123695e-01),
        IntegrationPoint(5.00000000000000000000000000000000e-01, 0.00000000000000000000000000000000e00, 1.66666666666666657414808128123695e-01),
        IntegrationPoint(0.00000000000000000000000000000000e00, 5.00000000000000000000000000000000e-01, 1.66666666666666657414808128123695e-01),
    ),
    3: (
        IntegrationPoint(3.33333333333333314829616256247391e-01, 3.33333333333333314829616256247391e-01, -2.81250000000000000000000000000000e-01),
        IntegrationPoint(2.00000000000000011102230246251565e-01, 2.00000000000000011102230246251565e-01, 2.60416666666666685170383743752609e-01),
        IntegrationPoint(2.00000000000000011102230246251565e-01, 5.99999999999999977795539507496869e-01, 2.60416666666666685170383743752609e-01),
        IntegrationPoint(5.99999999999999977795539507496869e-01, 2.00000000000000011102230246251565e-01, 2.60416666666666685170383743752609e-01),
    ),
    4: (
        IntegrationPoint(9.15762135097710067155318824916321e-02, 9.15762135097710067155318824916321e-02, 5.49758718276610602870846378209535e-02),
        IntegrationPoint(9.15762135097710067155318824916321e-02, 8.16847572980457958813360619387822e-01, 5.49758718276610602870846378209535e-02),
        IntegrationPoint(8.16847572980457958813360619387822e-01, 9.15762135097710067155318824916321e-02, 5.49758718276610602870846378209535e-02),
        IntegrationPoint(4.45948490915965001235576892213430e-01, 4.45948490915965001235576892213430e-01, 1.11690794839005624883299105931656e-01),
        IntegrationPoint(4.45948490915965001235576892213430e-01, 1.08103018168069997528846215573139e-01, 1.11690794839005624883299105931656e-01),
        IntegrationPoint(1.08103018168069997528846215573139e-01, 4.45948490915965001235576892213430e-01, 1.11690794839005624883299105931656e-01),
    ),
    5: (
        IntegrationPoint(3.33333333333333314829616256247391e-01, 3.33333333333333314829616256247391e-01, 1.12500000000000002775557561562891e-01),
        IntegrationPoint(1.01286507323456329010546994595643e-01, 1.01286507323456329010546994595643e-01, 6.29695902724135836425745083033689e-02),
        IntegrationPoint(1.01286507323456329010546994595643e-01, 7.97426985353087314223330395179801e-01, 6.29695902724135836425745083033689e-02),
        IntegrationPoint(7.97426985353087314223330395179801e-01, 1.01286507323456329010546994595643e-01, 6.29695902724135836425745083033689e-02),
        IntegrationPoint(4.70142064105115053962435922585428e-01, 4.70142064105115053962435922585428e-01, 6.61970763942530820989063045090006e-02),
        IntegrationPoint(4.70142064105115053962435922585428e-01, 5.97158717897698920751281548291445e-02, 6.61970763942530820989063045090006e-02),
        IntegrationPoint(5.97158717897698920751281548291445e-02, 4.70142064105115053962435922585428e-01, 6.61970763942530820989063045090006e-02),
    ),
}

# Entries are stored as (x, 0, w) and read back in that same order by
# TriangleIntegrator.border_load_vector.
_LINE_RULES: dict[int, tuple[IntegrationPoint, ...]] = {
    2: (
        IntegrationPoint(0.5, 0.0, 0.211324865405187),
        IntegrationPoint(0.5, 0.0, 0.788675134594813),
    ),
    3: (
        IntegrationPoint(0.277777777777778, 0.0, 0.112701665379258),
        IntegrationPoint(0.444444444444444, 0.0, 0.5),
        IntegrationPoint(0.277777777777778, 0.0, 0.887298334620742),
    ),
    4: (
        IntegrationPoint(0.173927422568727, 0.0, 0.0694318442029737),
        IntegrationPoint(0.326072577431273, 0.0, 0.330009478207572),
        IntegrationPoint(0.326072577431273, 0.0, 0.669990521792428),
        IntegrationPoint(0.173927422568727, 0.0, 0.930568155797026),
    ),
    5: (
        IntegrationPoint(0.118463442528095, 0.0, 0.046910077030668),
        IntegrationPoint(0.239314335249683, 0.0, 0.230765344947158),
        IntegrationPoint(0.284444444444444, 0.0, 0.5),
        IntegrationPoint(0.239314335249683, 0.0, 0.769234655052842),
        IntegrationPoint(0.118463442528095, 0.0, 0.953089922969332),
    ),
}

_REF_CORNERS = (Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))


def integration_points(degree: int) -> list[IntegrationPoint]:
    """Quadrature rule on the reference triangle for degrees 2 to 5."""
    try:
        return list(_TRIANGLE_RULES[degree])
    except KeyError:
        raise ValueError(f"integration_points: no formula for degree [{degree}]") from None


def line_integration_points(degree: int) -> list[IntegrationPoint]:
    """Gauss quadrature rule on [0, 1] for degrees 2 to 5; y components are zero."""
    try:
        return list(_LINE_RULES[degree])
    except KeyError:
        raise ValueError(f"line_integration_points: no formula for degree [{degree}]") from None


def jacobian(t: AffineTransform) -> Matrix2:
    """Jacobian of the transform, stored transposed relative to its linear part."""
    (m00, m01), (m10, m11) = t.m
    return ((m00, m10), (m01, m11))


def det(m: Matrix2) -> float:
    """Determinant of a 2x2 matrix."""
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]


def calc_b(t: AffineTransform) -> np.ndarray:
    """Adjugate-like matrix mapping reference gradients to global ones (up to 1/det)."""
    (m00, m01), (m10, m11) = t.m
    return np.array([[m11, -m10], [-m01, m00]], dtype=float)


def _shape_table(element: Element, points: Sequence[IntegrationPoint]) -> np.ndarray:
    return np.array([element.shape(p.x, p.y) for p in points], dtype=float)


def _grad_table(element: Element, points: Sequence[IntegrationPoint]) -> np.ndarray:
    """Array of shape (len(points), 2, dof)."""
    return np.array([element.grad(p.x, p.y) for p in points], dtype=float)


class TriangleIntegrator:
    """Integrates local element matrices for a main and an optional secondary element."""

    def __init__(self, element: Element, degree: int, secondary: Element | None = None) -> None:
        self.element = element
        self.secondary = secondary
        self.points = integration_points(degree)
        self.line_points = line_integration_points(degree)
        self._weights = np.array([p.w for p in self.points], dtype=float)
        self._phi = _shape_table(element, self.points)
        self._grad = _grad_table(element, self.points)
        if secondary is not None:
            self._phi2 = _shape_table(secondary, self.points)
            self._grad2 = _grad_table(secondary, self.points)

    @property
    def dof(self) -> int:
        return self.element.dof

    def mass_matrix(self, t: AffineTransform) -> np.ndarray:
        """Local mass matrix [(phi_i, phi_j)]."""
        phi = self._phi
        local = phi.T @ (phi * self._weights[:, None])
        return local * abs(det(jacobian(t)))

    def stiffness_matrix(self, t: AffineTransform) -> np.ndarray:
        """Local stiffness matrix [(grad phi_i, grad phi_j)]."""
        inv_abs_det = 1.0 / abs(det(jacobian(t)))
        b = calc_b(t)
        btb = b.T @ b
        n = self.dof
        result = np.zeros((n, n))
        for grad, w in zip(self._grad, self._weights):
            result += grad.T @ btb @ grad * (w * inv_abs_det)
        return result

    def load_vector(self, t: AffineTransform, func: Callable[[float, float], float]) -> np.ndarray:
        """Local load vector [(f, phi_i)] for a scalar function f(x, y) in global coordinates."""
        abs_det = abs(det(jacobian(t)))
        result = np.zeros(self.dof)
        for p, phi in zip(self.points, self._phi):
            g = t(Point(p.x, p.y))
            result += phi * (p.w * abs_det * func(g.x, g.y))
        return result

    def border_load_vector(
        self, t: AffineTransform, flow: Callable[[Point], Point], side: int
    ) -> np.ndarray:
        """Local vector of the normal flux of ``flow`` through one side of the triangle.

        ``side`` is in [0, 6); sides 2k and 2k+1 both denote the edge starting at corner k.
        """
        if not 0 <= side < 6:
            raise ValueError(f"border_load_vector: side must be in [0, 6), got {side}")
        side_id = side // 2
        start = _REF_CORNERS[side_id]
        end = _REF_CORNERS[(side_id + 1) % 3]

        g_start = t(start)
        g_end = t(end)
        # Left unnormalised so that it carries the side length.
        normal = Point(g_end.y - g_start.y, -(g_end.x - g_start.x))

        result = np.zeros(self.dof)
        for p in self.line_points:
            s = p.x
            comp = 1 - s
            ref = Point(comp * start.x + s * end.x, comp * start.y + s * end.y)
            f = flow(t(ref))
            normal_flow = f.x * normal.x + f.y * normal.y
            phi = np.asarray(self.element.shape(ref.x, ref.y), dtype=float)
            result += phi * (p.w * normal_flow)
        return result

    def _convection(self, t: AffineTransform, flows: Sequence[tuple[float, float]]) -> np.ndarray:
        j_sign = -1.0 if det(jacobian(t)) < 0 else 1.0
        b = calc_b(t)
        n = self.dof
        result = np.zeros((n, n))
        for (fx, fy), phi, grad, w in zip(flows, self._phi, self._grad, self._weights):
            local_flow = b.T @ np.array([fx, fy])
            grad_flow_dot = local_flow @ grad
            result += np.outer(phi, grad_flow_dot) * (w * j_sign)
        return result

    def convection_matrix(self, t: AffineTransform, flow: Callable[[Point], Point]) -> np.ndarray:
        """Local convection matrix [(flow . grad phi_j, phi_i)] for a flow given as a function."""
        flows = []
        for p in self.points:
            f = flow(t(Point(p.x, p.y)))
            flows.append((f.x, f.y))
        return self._convection(t, flows)

    def self_convection_matrix(
        self, t: AffineTransform, flow_x: Sequence[float], flow_y: Sequence[float]
    ) -> np.ndarray:
        """Local convection matrix for a flow given by its nodal values on this element."""
        fx = np.asarray(flow_x, dtype=float)
        fy = np.asarray(flow_y, dtype=float)
        if fx.shape != (self.dof,) or fy.shape != (self.dof,):
            raise ValueError(f"self_convection_matrix: flow vectors must have {self.dof} values")
        flows = [(float(phi @ fx), float(phi @ fy)) for phi in self._phi]
        return self._convection(t, flows)

    def divergence_matrices(self, t: AffineTransform, swap: bool) -> tuple[np.ndarray, np.ndarray]:
        """Matrices [(dM_j/dx, S_i)] and [(dM_j/dy, S_i)], of shape (dof S, dof M).

        M is the main element and S the secondary one, or the other way round
        when ``swap`` is true. Requires a secondary element.
        """
        if self.secondary is None:
            raise RuntimeError("divergence_matrices: no secondary element in integrator")
        if swap:
            m_grad, s_phi = self._grad2, self._phi
        else:
            m_grad, s_phi = self._grad, self._phi2

        j_sign = -1.0 if det(jacobian(t)) < 0 else 1.0
        b = calc_b(t)
        dof_s = s_phi.shape[1]
        dof_m = m_grad.shape[2]
        dst_x = np.zeros((dof_s, dof_m))
        dst_y = np.zeros((dof_s, dof_m))
        for phi, grad, w in zip(s_phi, m_grad, self._weights):
            global_grad = b @ grad
            weight = w * j_sign
            dst_x += np.outer(phi, global_grad[0]) * weight
            dst_y += np.outer(phi, global_grad[1]) * weight
        return dst_x, dst_y