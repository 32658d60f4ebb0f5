"""Small element-wise vector and nested-tuple matrix helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

Vector = tuple
Grid = tuple


def _check_same_length(a: Sequence[Any], b: Sequence[Any]) -> None:
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} vs {len(b)}")


def add(a: Sequence[Any], b: Sequence[Any]) -> Vector:
    _check_same_length(a, b)
    return tuple(x + y for x, y in zip(a, b))


def sub(a: Sequence[Any], b: Sequence[Any]) -> Vector:
    _check_same_length(a, b)
    return tuple(x - y for x, y in zip(a, b))


def mul(a: Sequence[Any], b: Sequence[Any]) -> Vector:
    """Element-wise product."""
    _check_same_length(a, b)
    return tuple(x * y for x, y in zip(a, b))


def scale(a: Sequence[Any], s: Any) -> Vector:
    return tuple(x * s for x in a)


def div(a: Sequence[Any], s: Any) -> Vector:
    return tuple(x / s for x in a)


def norm2(a: Sequence[float]) -> float:
    """Euclidean length."""
    return math.sqrt(sum(x * x for x in a))


def mean(a: Sequence[float]) -> float:
    if not a:
        raise ValueError("mean of an empty sequence")
    return sum(a) / len(a)


def var(a: Sequence[float], mean_value: float) -> float:
    """Population variance about ``mean_value``."""
    if not a:
        raise ValueError("variance of an empty sequence")
    return sum((x - mean_value) ** 2 for x in a) / len(a)


def cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs two 3-vectors")
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    _check_same_length(a, b)
    return sum(x * y for x, y in zip(a, b))


def vec_to_array(v: Sequence[Any], n: int) -> Vector:
    """Return ``v`` as a tuple, requiring exactly ``n`` elements."""
    if len(v) != n:
        raise ValueError(f"expected {n} elements, got {len(v)}")
    return tuple(v)


def _shape(m: Sequence[Sequence[Any]]) -> tuple[int, int]:
    widths = {len(row) for row in m}
    if len(widths) > 1:
        raise ValueError("ragged matrix")
    return len(m), (widths.pop() if widths else 0)


def matrix_mult(left: Sequence[Sequence[Any]], right: Sequence[Sequence[Any]]) -> Grid:
    """Naive product of an N x M and an M x L matrix."""
    _, m_left = _shape(left)
    m_right, l_right = _shape(right)
    if m_left != m_right:
        raise ValueError(f"inner dimensions differ: {m_left} vs {m_right}")
    columns = [tuple(row[col] for row in right) for col in range(l_right)]
    return tuple(
        tuple(sum((x * y for x, y in zip(row, column)), 0) for column in columns)
        for row in left
    )


def arr_to_col(v: Sequence[Any]) -> Grid:
    return tuple((x,) for x in v)


def arr_to_row(v: Sequence[Any]) -> Grid:
    return (tuple(v),)


def row_to_arr(v: Sequence[Sequence[Any]]) -> Vector:
    if len(v) != 1:
        raise ValueError("a row matrix has exactly one row")
    return tuple(v[0])


def col_to_arr(v: Sequence[Sequence[Any]]) -> Vector:
    if any(len(row) != 1 for row in v):
        raise ValueError("a column matrix has exactly one column")
    return tuple(row[0] for row in v)


def matrix_hadamard(left: Sequence[Sequence[Any]], right: Sequence[Sequence[Any]]) -> Grid:
    """Element-wise product of two equally shaped matrices."""
    if _shape(left) != _shape(right):
        raise ValueError("matrix shapes differ")
    return tuple(
        tuple(x * y for x, y in zip(lrow, rrow)) for lrow, rrow in zip(left, right)
    )


def matrix_scalar_mult(left: Any, right: Sequence[Sequence[Any]]) -> Grid:
    return tuple(tuple(left * x for x in row) for row in right)