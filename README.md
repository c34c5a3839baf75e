# trifem

Building blocks for the finite element method on triangular meshes.

## Modules

- `trifem.point`: the frozen `Point` dataclass with `normalize` and `distance`.
- `trifem.transform`: `AffineTransform` (`apply`, `apply_no_offset`, calling
  the transform, `AffineTransform.identity()`), `from_ref_triangle`, which
  maps the reference triangle `(0,0), (1,0), (0,1)` onto three points, and
  `invert`, which raises `ValueError` for a singular transform.
- `trifem.elements`: `ElementType`, the abstract `Element` and the Lagrange
  elements `P0`, `P1` and `P2` with `shape`, `grad` and `value`, plus
  `create_triangle_border_nodes` and the factory `create_element`.
- `trifem.integrator`: quadrature rules for degrees 2 to 5
  (`integration_points`, `line_integration_points`), the helpers `jacobian`,
  `det` and `calc_b`, and `TriangleIntegrator`, which computes local
  `mass_matrix`, `stiffness_matrix`, `load_vector`, `border_load_vector`,
  `convection_matrix`, `self_convection_matrix` and `divergence_matrices`
  (the last one needs a secondary element).
- `trifem.boundary`: `DirichletNode`, `extract_dirichlet_nodes`,
  `extract_dirichlet_nodes_constant`, `extract_internal_nodes` and
  `project_triplets`. Border elements are given as `(group, node_ids)` pairs.
- `trifem.assembly`: `build_matrix` (dense, duplicates summed),
  `stiffness_triplets` (optionally with a convection term),
  `solve_with_dirichlet` and `l2_project`.
- `trifem.conditions`: dataclasses for a flow-around-a-cylinder run:
  `DfgConditions` (with the parabolic inflow `left_velocity`),
  `TimeStepSolution`, `Solution`, `SolverConfig`, `ChorinCudaConfig`,
  `OutputConfig` and `NsConfig`, with their default values.
- `trifem.samples`: the sample functions `wave_function` and `gaussian_bump`,
  and `check_shape_functions`, which returns the nodes where a shape function
  is not 1 at its own node and 0 at the others.

## Installation

```
pip install .
```

## Example

Local matrices on one triangle:

```python
from trifem.point import Point
from trifem.elements import ElementType, create_element
from trifem.transform import from_ref_triangle
from trifem.integrator import TriangleIntegrator

element = create_element(ElementType.P1)
integrator = TriangleIntegrator(element, 4)

t = from_ref_triangle(Point(0.0, 0.0), Point(2.0, 0.0), Point(0.0, 1.0))
mass = integrator.mass_matrix(t)
stiffness = integrator.stiffness_matrix(t)
```

Local matrices come back as NumPy arrays of shape `(dof, dof)`.

L2 projection on the unit square split into two P1 triangles:

```python
from trifem.assembly import l2_project
from trifem.samples import gaussian_bump

nodes = [Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)]
elements = [(0, 1, 2), (1, 3, 2)]
transforms = [from_ref_triangle(*(nodes[i] for i in ids)) for ids in elements]

values = l2_project(integrator, elements, transforms, len(nodes), gaussian_bump)
```

## What the package does not do

- It reads no mesh files and has no mesh type of its own: the caller supplies
  node ids per element, the transforms and the border elements.
- It draws no images and has no command-line program.
- Global systems are assembled and solved as dense NumPy arrays, so it suits
  small meshes.
- `trifem.conditions` only holds settings and result containers; there is no
  time-stepping flow solver and no configuration file reader.

## Tests

```
pip install .[test]
pytest
```