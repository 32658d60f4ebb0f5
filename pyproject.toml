[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latticefields"
version = "0.1.0"
description = "Periodic-box geometry, Lennard-Jones potentials, parameter files and .gro reading for lattice models"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lattice",
    "molecular simulation",
    "lennard-jones",
    "periodic boundary conditions",
    "gro",
    "parameter files",
    "cell list",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["latticefields"]

[tool.hatch.build.targets.sdist]
include = ["latticefields", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
