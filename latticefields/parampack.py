"""Hierarchical key/value store filled from parameter input files."""

from __future__ import annotations

import copy
import enum
from collections.abc import Iterator
from typing import Any, TypeVar

from latticefields.stringtools import (
    string_to_bool,
    string_to_value,
    strings_to_array,
    strings_to_vector,
)

_T = TypeVar("_T")


class KeyType(enum.Enum):
    """Whether a looked-up key must be present."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class KeyNotFoundError(LookupError):
    """A mandatory key was not found."""

    def __init__(self, key: str, context: str) -> None:
        self.key = key
        self.context = context
        super().__init__(f'Mandatory key "{key}" was not found in context "{context}"')


class DuplicateKeyError(LookupError):
    """A key that should be unique appears more than once."""

    def __init__(self, key: str, count: int, context: str) -> None:
        self.key = key
        self.count = count
        self.context = context
        super().__init__(
            f'Unique key "{key}" appears {count} times in context "{context}"\n'
            "  It is unclear which one should be used."
        )


class ParameterPack:
    """Named group of string values, string vectors and nested packs.

    Every key may hold several entries of each kind; entries under one key
    keep their insertion order, and keys are reported in sorted order.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._values: dict[str, list[str]] = {}
        self._vectors: dict[str, list[list[str]]] = {}
        self._packs: dict[str, list[ParameterPack]] = {}

    def __repr__(self) -> str:
        return f"ParameterPack(name={self.name!r})"

    # ----- adding and removing -----

    def insert_value(self, key: str, value: str) -> str:
        self._values.setdefault(key, []).append(value)
        return value

    def insert_vector(self, key: str, vec: list[str]) -> list[str]:
        """Store a copy of ``vec`` under ``key`` and return the stored copy."""
        stored = list(vec)
        self._vectors.setdefault(key, []).append(stored)
        return stored

    def insert_pack(self, key: str, pack: ParameterPack) -> ParameterPack:
        """Store a copy of ``pack`` under ``key`` and return the stored copy."""
        stored = copy.deepcopy(pack)
        self._packs.setdefault(key, []).append(stored)
        return stored

    def erase_values(self, key: str) -> None:
        """Remove every plain value registered under ``key``."""
        self._values.pop(key, None)

    def clear(self) -> None:
        self._values.clear()
        self._vectors.clear()
        self._packs.clear()

    # ----- searching -----

    def _find_all(self, table: dict[str, list[_T]], key: str, key_type: KeyType) -> list[_T]:
        matches = list(table.get(key, ()))
        if not matches and key_type is KeyType.REQUIRED:
            raise KeyNotFoundError(key, self.name)
        return matches

    def _find_one(self, table: dict[str, list[_T]], key: str, key_type: KeyType) -> _T | None:
        matches = self._find_all(table, key, key_type)
        if len(matches) > 1:
            raise DuplicateKeyError(key, len(matches), self.name)
        return matches[0] if matches else None

    def find_values(self, key: str, key_type: KeyType) -> list[str]:
        return self._find_all(self._values, key, key_type)

    def find_vectors(self, key: str, key_type: KeyType) -> list[list[str]]:
        return self._find_all(self._vectors, key, key_type)

    def find_parameter_packs(self, key: str, key_type: KeyType) -> list[ParameterPack]:
        return self._find_all(self._packs, key, key_type)

    def find_value(self, key: str, key_type: KeyType) -> str | None:
        """The unique value under ``key``, or None if it is optional and absent."""
        return self._find_one(self._values, key, key_type)

    def find_vector(self, key: str, key_type: KeyType) -> list[str] | None:
        return self._find_one(self._vectors, key, key_type)

    def find_parameter_pack(self, key: str, key_type: KeyType) -> ParameterPack | None:
        return self._find_one(self._packs, key, key_type)

    def find_required_value(self, key: str) -> str:
        return self._find_one(self._values, key, KeyType.REQUIRED)  # type: ignore[return-value]

    def find_required_vector(self, key: str) -> list[str]:
        return self._find_one(self._vectors, key, KeyType.REQUIRED)  # type: ignore[return-value]

    def find_required_parameter_pack(self, key: str) -> ParameterPack:
        return self._find_one(self._packs, key, KeyType.REQUIRED)  # type: ignore[return-value]

    # ----- conversions -----

    def read_number(self, key: str, key_type: KeyType, type_: type = float) -> Any:
        """The unique value under ``key`` converted to ``type_``, or None if absent."""
        value = self.find_value(key, key_type)
        return None if value is None else string_to_value(value, type_)

    def read_flag(self, key: str, key_type: KeyType) -> bool | None:
        value = self.find_value(key, key_type)
        return None if value is None else string_to_bool(value)

    def read_string(self, key: str, key_type: KeyType) -> str | None:
        return self.find_value(key, key_type)

    def read_array(self, key: str, key_type: KeyType, type_: type, dim: int) -> tuple | None:
        """The unique vector under ``key`` as a tuple of exactly ``dim`` items."""
        vec = self.find_vector(key, key_type)
        return None if vec is None else strings_to_array(vec, type_, dim)

    def read_vector(self, key: str, key_type: KeyType, type_: type = str) -> list | None:
        vec = self.find_vector(key, key_type)
        return None if vec is None else strings_to_vector(vec, type_)

    # ----- output -----

    def _format_lines(self, indent: str) -> Iterator[str]:
        inner = indent + "  "
        deeper = indent + "    "
        yield f"{indent}{self.name} = {{\n"
        yield f"{inner}values = {{\n"
        for key in sorted(self._values):
            for value in self._values[key]:
                yield f"{deeper}{key} = {value}\n"
        yield f"{inner}}}\n"
        yield f"{inner}vectors = {{\n"
        for key in sorted(self._vectors):
            for vec in self._vectors[key]:
                items = "".join(f" {item}" for item in vec)
                yield f"{deeper}{key} = [{items} ]\n"
        yield f"{inner}}}\n"
        yield f"{inner}parameter_packs = {{\n"
        for key in sorted(self._packs):
            for pack in self._packs[key]:
                yield from pack._format_lines(deeper)
        yield f"{inner}}}\n"
        yield f"{indent}}}\n"

    def format(self, indent: str = "") -> str:
        """Human-readable dump of the whole pack, nested packs included."""
        return "".join(self._format_lines(indent))