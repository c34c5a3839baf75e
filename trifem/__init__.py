"""Triangular finite elements: shape functions, quadrature, local matrices and dense solvers."""

__version__ = "0.1.0"