"""Vector and small dense matrix arithmetic on plain Python sequences.

Vectors are sequences of numbers; matrices are sequences of equal-length rows.
"""

from __future__ import annotations

import math
from typing import Sequence

Vector = list[float]
Matrix = list[list[float]]


def _same_length(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} and {len(b)}")


def _shape(m: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(m)
    cols = len(m[0]) if rows else 0
    if any(len(row) != cols for row in m):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def add(a: Sequence[float], b: Sequence[float]) -> Vector:
    _same_length(a, b)
    return [x + y for x, y in zip(a, b)]


def subtract(a: Sequence[float], b: Sequence[float]) -> Vector:
    _same_length(a, b)
    return [x - y for x, y in zip(a, b)]


def scale(s: float, v: Sequence[float]) -> Vector:
    return [s * x for x in v]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    _same_length(a, b)
    return sum(x * y for x, y in zip(a, b))


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    _same_length(a, b)
    return sum((x - y) * (x - y) for x, y in zip(a, b))


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(squared_distance(a, b))


def squared_magnitude(v: Sequence[float]) -> float:
    return sum(x * x for x in v)


def magnitude(v: Sequence[float]) -> float:
    return math.sqrt(squared_magnitude(v))


def normalize(v: Sequence[float]) -> Vector:
    """Return ``v`` scaled to unit length."""
    mag = magnitude(v)
    if mag == 0:
        raise ValueError("cannot normalize a zero vector")
    return [x / mag for x in v]


def cross_product(v1: Sequence[float], v2: Sequence[float]) -> Vector:
    a0, a1, a2 = v1
    b0, b1, b2 = v2
    return [
        a1 * b2 - a2 * b1,
        a2 * b0 - a0 * b2,
        a0 * b1 - a1 * b0,
    ]


def cross_matrix(v: Sequence[float]) -> Matrix:
    """Return the skew-symmetric matrix V with ``V @ w == cross_product(v, w)``."""
    v0, v1, v2 = v
    return [
        [0.0, -v2, v1],
        [v2, 0.0, -v0],
        [-v1, v0, 0.0],
    ]


def mat_add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    if _shape(a) != _shape(b):
        raise ValueError("matrix shapes differ")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def mat_ab(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product ``a @ b``."""
    _, acols = _shape(a)
    brows, _ = _shape(b)
    if acols != brows:
        raise ValueError("inner dimensions differ")
    bcols = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in bcols] for row in a]


def mat_abt(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return ``a @ b.T``."""
    _, acols = _shape(a)
    _, bcols = _shape(b)
    if acols != bcols:
        raise ValueError("column counts differ")
    return [[sum(x * y for x, y in zip(ra, rb)) for rb in b] for ra in a]


def mat_abc(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    c: Sequence[Sequence[float]],
) -> Matrix:
    """Return ``a @ b @ c``."""
    return mat_ab(mat_ab(a, b), c)


def mat_ab_vector(a: Sequence[Sequence[float]], b: Sequence[float]) -> Vector:
    """Return the matrix-vector product ``a @ b``."""
    _, acols = _shape(a)
    if acols != len(b):
        raise ValueError("vector length does not match matrix columns")
    return [sum(x * y for x, y in zip(row, b)) for row in a]


def mat_atb(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return ``a.T @ b``."""
    arows, _ = _shape(a)
    brows, _ = _shape(b)
    if arows != brows:
        raise ValueError("row counts differ")
    return mat_ab([list(col) for col in zip(*a)], b)