"""Periodic boundary helpers for orthorhombic boxes."""

from __future__ import annotations

import math
from collections.abc import Sequence


def wrap_number(x: float, x_max: float) -> float:
    """Wrap ``x`` into ``[0, x_max)``."""
    return x - x_max * math.floor(x / x_max)


def wrap_index(i: int, i_max: int) -> int:
    """Wrap an integer index into ``[0, i_max)``."""
    return i % i_max


def _check_orthorhombic(position: Sequence[float], box_size: Sequence[float]) -> None:
    if len(box_size) != len(position):
        raise ValueError(
            "only orthorhombic boxes with one edge length per dimension are supported"
        )


def place_inside_box(position: Sequence[float], box_size: Sequence[float]) -> tuple:
    """Return ``position`` wrapped into the primary box."""
    _check_orthorhombic(position, box_size)
    return tuple(x - box * math.floor(x / box) for x, box in zip(position, box_size))


def distance_no_pbc(x1: Sequence[float], x2: Sequence[float]) -> float:
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(x1, x2)))


def distance(x1: Sequence[float], x2: Sequence[float], box_size: Sequence[float]) -> float:
    """Minimum-image distance in an orthorhombic box."""
    _check_orthorhombic(x1, box_size)
    total = 0.0
    for a, b, box in zip(x1, x2, box_size):
        dx = b - a
        while dx >= 0.5 * box:
            dx -= box
        while dx < -0.5 * box:
            dx += box
        total += dx * dx
    return math.sqrt(total)


def nearest_image_1d(x: float, xref: float, box_size: float) -> float:
    """Shift ``x`` by whole box lengths to lie within half a box of ``xref``."""
    while x - xref >= 0.5 * box_size:
        x -= box_size
    while x - xref < -0.5 * box_size:
        x += box_size
    return x


def nearest_image_3d(
    x: Sequence[float], xref: Sequence[float], box_size: Sequence[float]
) -> tuple:
    return tuple(nearest_image_1d(a, r, box) for a, r, box in zip(x, xref, box_size))