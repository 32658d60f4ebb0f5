"""Lennard-Jones pair potentials."""

from __future__ import annotations

# 3*sqrt(3)/2, which makes the 9-3 well depth equal to epsilon
_LJ_3_9_PREFACTOR = 2.598076211


def lj_6_12(r: float, epsilon: float, sigma: float) -> float:
    """12-6 Lennard-Jones energy at separation ``r``."""
    sigma6 = (sigma / r) ** 6
    return -4.0 * epsilon * (sigma6 - sigma6 * sigma6)


def lj_3_9(r: float, epsilon: float, sigma: float) -> float:
    """9-3 Lennard-Jones (wall-like) energy at separation ``r``."""
    sigma3 = (sigma / r) ** 3
    return _LJ_3_9_PREFACTOR * epsilon * (sigma3 * sigma3 * sigma3 - sigma3)