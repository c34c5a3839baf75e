"""Global assembly and solution of finite element systems on triangle meshes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import numpy as np

from trifem.boundary import DirichletNode, Triplet, extract_internal_nodes, project_triplets
from trifem.integrator import TriangleIntegrator
from trifem.point import Point
from trifem.transform import AffineTransform


def build_matrix(triplets: Iterable[Triplet], size: int) -> np.ndarray:
    """Dense ``size`` x ``size`` matrix from ``(row, col, value)`` triplets; duplicates are summed.

    Raises IndexError for entries outside the matrix.
    """
    matrix = np.zeros((size, size))
    for row, col, value in triplets:
        if not (0 <= row < size and 0 <= col < size):
            raise IndexError(f"build_matrix: entry ({row}, {col}) out of range for size {size}")
        matrix[row, col] += value
    return matrix


def _check_mesh(integrator: TriangleIntegrator, elements: Sequence[Sequence[int]],
                transforms: Sequence[AffineTransform]) -> None:
    if len(elements) != len(transforms):
        raise ValueError("elements and transforms have different lengths")
    for ids in elements:
        if len(ids) != integrator.dof:
            raise ValueError(f"element {list(ids)} does not have {integrator.dof} nodes")


def _scatter(ids: Sequence[int], local: np.ndarray) -> list[Triplet]:
    return [
        (row_id, col_id, float(local[r, c]))
        for r, row_id in enumerate(ids)
        for c, col_id in enumerate(ids)
    ]


def stiffness_triplets(
    integrator: TriangleIntegrator,
    elements: Sequence[Sequence[int]],
    transforms: Sequence[AffineTransform],
    flow: Callable[[Point], Point] | None = None,
) -> list[Triplet]:
    """Triplets of the global stiffness matrix, with the convection matrix of ``flow`` added if given.

    ``elements[k]`` holds the global node ids of element ``k`` and ``transforms[k]``
    maps the reference triangle onto it.
    """
    _check_mesh(integrator, elements, transforms)
    triplets: list[Triplet] = []
    for ids, t in zip(elements, transforms):
        local = integrator.stiffness_matrix(t)
        if flow is not None:
            local = local + integrator.convection_matrix(t, flow)
        triplets.extend(_scatter(ids, local))
    return triplets


def solve_with_dirichlet(
    triplets: Sequence[Triplet],
    num_nodes: int,
    dirichlet_nodes: Sequence[DirichletNode],
    load: Sequence[float] | None = None,
) -> np.ndarray:
    """Solve ``M q = load`` with the values of ``dirichlet_nodes`` prescribed.

    ``dirichlet_nodes`` must be sorted by id. A missing ``load`` is taken as zero.
    Returns the values at all ``num_nodes`` nodes.
    """
    b0 = np.zeros(num_nodes) if load is None else np.asarray(load, dtype=float)
    if b0.shape != (num_nodes,):
        raise ValueError(f"solve_with_dirichlet: load must have {num_nodes} values")

    internal = extract_internal_nodes(num_nodes, dirichlet_nodes)
    matrix = build_matrix(triplets, num_nodes)

    prescribed = np.zeros(num_nodes)
    for node in dirichlet_nodes:
        prescribed[node.id] = node.value

    result = np.zeros(num_nodes)
    if internal:
        sub = matrix @ prescribed
        rhs = b0[internal] - sub[internal]
        internal_matrix = build_matrix(project_triplets(num_nodes, triplets, internal), len(internal))
        result[internal] = np.linalg.solve(internal_matrix, rhs)
    for node in dirichlet_nodes:
        result[node.id] = node.value
    return result


def l2_project(
    integrator: TriangleIntegrator,
    elements: Sequence[Sequence[int]],
    transforms: Sequence[AffineTransform],
    num_nodes: int,
    func: Callable[[float, float], float],
) -> np.ndarray:
    """Nodal values of the L2 projection of ``func(x, y)`` onto the finite element space."""
    _check_mesh(integrator, elements, transforms)
    triplets: list[Triplet] = []
    rhs = np.zeros(num_nodes)
    for ids, t in zip(elements, transforms):
        triplets.extend(_scatter(ids, integrator.mass_matrix(t)))
        for node_id, value in zip(ids, integrator.load_vector(t, func)):
            rhs[node_id] += value
    return np.linalg.solve(build_matrix(triplets, num_nodes), rhs)