"""Cell list that partitions a periodic box into cells no smaller than a cutoff."""

from __future__ import annotations

import math
from collections.abc import Sequence

from latticefields.pbc import wrap_index


class CellGrid:
    """Bins indices by position so that neighbours within the cutoff lie in adjacent cells."""

    def __init__(self, cutoff: float, box_size: Sequence[float]) -> None:
        self._cells: list[list[int]] = []
        self._nx: tuple[int, int, int] = (0, 0, 0)
        self._sxi: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.reset(cutoff, box_size)

    def reset(self, cutoff: float, box_size: Sequence[float]) -> None:
        """Rebuild an empty grid for a new cutoff and box."""
        if cutoff <= 0:
            raise ValueError(f"cutoff must be positive, got {cutoff}")
        if len(box_size) != 3 or any(b <= 0 for b in box_size):
            raise ValueError(f"box_size must be three positive lengths, got {box_size}")
        nx = tuple(math.ceil(b / cutoff) for b in box_size)
        self._nx = nx  # type: ignore[assignment]
        self._sxi = tuple(n / b for n, b in zip(nx, box_size))  # type: ignore[assignment]
        self._cells = [[] for _ in range(nx[0] * nx[1] * nx[2])]

    def _cell_of(self, coord: Sequence[int]) -> list[int]:
        x, y, z = (wrap_index(c, n) for c, n in zip(coord, self._nx))
        return self._cells[z * self._nx[0] * self._nx[1] + y * self._nx[0] + x]

    def nearby_indices(
        self, position: Sequence[float], exclude: int | None = None
    ) -> list[int]:
        """Indices stored in the 27 cells around ``position``.

        With ``exclude`` given, the cell is found by flooring and every
        occurrence of ``exclude`` is removed; without it the cell coordinate
        is truncated toward zero.
        """
        if exclude is None:
            coord = [int(p * s) for p, s in zip(position, self._sxi)]
        else:
            coord = [math.floor(p * s) for p, s in zip(position, self._sxi)]
        found: list[int] = []
        for di in (-1, 0, 1):
            for dj in (-1, 0, 1):
                for dk in (-1, 0, 1):
                    found.extend(self._cell_of((coord[0] + di, coord[1] + dj, coord[2] + dk)))
        if exclude is not None:
            found = [idx for idx in found if idx != exclude]
        return found

    def add_index(self, atom_index: int, position: Sequence[float]) -> None:
        coord = [math.floor(p * s) for p, s in zip(position, self._sxi)]
        self._cell_of(coord).append(atom_index)