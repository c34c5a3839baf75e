[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trifem"
version = "0.1.0"
description = "Triangular finite elements: P0/P1/P2 shape functions, quadrature, local matrices and simple dense solvers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["finite elements", "fem", "triangle", "quadrature", "pde", "l2 projection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["trifem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
