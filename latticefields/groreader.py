"""Reader for fixed-column GROMACS .gro coordinate files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from latticefields.stringtools import string_to_value, trim_whitespace


@dataclass
class SimpleAtom:
    """One atom record: position, velocity, atom name and residue name."""

    x: tuple[float, float, float] = (0.0, 0.0, 0.0)
    v: tuple[float, float, float] = (0.0, 0.0, 0.0)
    name: str = ""
    resname: str = ""
    has_position: bool = False
    has_velocity: bool = False


def _floats(line: str, start: int) -> tuple[float, float, float]:
    return tuple(  # type: ignore[return-value]
        string_to_value(line[pos:pos + 8], float) for pos in (start, start + 8, start + 16)
    )


def _parse_atom(line: str) -> SimpleAtom:
    string_to_value(line[0:5], int)  # residue number, validated only
    resname = trim_whitespace(line[5:10])
    atomname = trim_whitespace(line[10:15])
    string_to_value(line[15:20], int)  # atom number, validated only
    position = _floats(line, 20)
    velocity = _floats(line, 44) if len(line) >= 68 else (0.0, 0.0, 0.0)
    return SimpleAtom(x=position, v=velocity, name=atomname, resname=resname)


def read_gro(path: str | os.PathLike) -> list[SimpleAtom]:
    """Read the atoms of a .gro file; velocities default to zero when absent."""
    with open(path) as fin:
        lines = (line.rstrip("\n") for line in fin)
        try:
            next(lines)  # title
            natoms = string_to_value(next(lines), int)
        except StopIteration:
            raise ValueError(f"gro file {path} is missing its header") from None
        atoms = []
        for count in range(natoms):
            line = next(lines, None)
            if line is None:
                raise ValueError(f"gro file {path} ends after {count} of {natoms} atoms")
            atoms.append(_parse_atom(line))
    return atoms