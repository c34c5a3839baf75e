"""Dirichlet boundary handling: collecting boundary nodes and restricting systems to internal nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

BorderElement = tuple[int, Sequence[int]]
Triplet = tuple[int, int, float]


@dataclass(frozen=True, order=True)
class DirichletNode:
    """A node with a prescribed value; nodes order by id alone."""

    id: int
    value: float = field(compare=False)


def extract_dirichlet_nodes(
    border_elements: Iterable[BorderElement],
    border_ids: Sequence[int],
    value_fn: Callable[[int, int], float],
) -> list[DirichletNode]:
    """Collect the nodes of border elements whose group is one of ``border_ids``.

    ``border_elements`` yields ``(group, node_ids)`` pairs. The value of each node
    is ``value_fn(node_id, group)`` for the first border element the node is met
    on. The result is sorted by node id and holds each node once.
    """
    wanted = set(border_ids)
    seen: set[int] = set()
    result: list[DirichletNode] = []
    for group, node_ids in border_elements:
        if group not in wanted:
            continue
        for node_id in node_ids:
            if node_id in seen:
                continue
            seen.add(node_id)
            result.append(DirichletNode(node_id, value_fn(node_id, group)))
    result.sort()
    return result


def extract_dirichlet_nodes_constant(
    border_elements: Iterable[BorderElement],
    border_ids: Sequence[int],
    border_values: Sequence[float],
) -> list[DirichletNode]:
    """Like :func:`extract_dirichlet_nodes`, with one constant value per border group.

    ``border_values[k]`` is the value on group ``border_ids[k]``.
    Raises ValueError when the two sequences differ in length.
    """
    if len(border_ids) != len(border_values):
        raise ValueError("extract_dirichlet_nodes_constant: ids/values have different sizes")
    values: dict[int, float] = {}
    for group, value in zip(border_ids, border_values):
        values.setdefault(group, value)
    return extract_dirichlet_nodes(border_elements, border_ids, lambda _node, group: values[group])


def extract_internal_nodes(num_nodes: int, dirichlet_nodes: Sequence[DirichletNode]) -> list[int]:
    """Ids in ``range(num_nodes)`` that are not Dirichlet nodes, in increasing order.

    Raises ValueError when ``dirichlet_nodes`` is not sorted by id.
    """
    ids = [node.id for node in dirichlet_nodes]
    if any(a > b for a, b in zip(ids, ids[1:])):
        raise ValueError("extract_internal_nodes: Dirichlet nodes must be sorted by id")
    excluded = set(ids)
    return [i for i in range(num_nodes) if i not in excluded]


def project_triplets(num_nodes: int, triplets: Iterable[Triplet], new_ids: Sequence[int]) -> list[Triplet]:
    """Restrict ``(row, col, value)`` triplets to the nodes in ``new_ids``.

    Node ``new_ids[k]`` becomes index ``k``; triplets touching any other node are
    dropped. Raises IndexError for node ids outside ``range(num_nodes)``.
    """
    remap: dict[int, int] = {}
    for new, old in enumerate(new_ids):
        if not 0 <= old < num_nodes:
            raise IndexError(f"project_triplets: node id {old} out of range [0, {num_nodes})")
        remap[old] = new

    result: list[Triplet] = []
    for row, col, value in triplets:
        if not (0 <= row < num_nodes and 0 <= col < num_nodes):
            raise IndexError(f"project_triplets: entry ({row}, {col}) out of range [0, {num_nodes})")
        i = remap.get(row)
        j = remap.get(col)
        if i is None or j is None:
            continue
        result.append((i, j, value))
    return result