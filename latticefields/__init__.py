"""Periodic-box geometry, Lennard-Jones potentials, parameter files and .gro reading for lattice models."""

__version__ = "0.1.0"