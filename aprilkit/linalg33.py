"""Cholesky-based solving of symmetric positive-definite 3x3 systems.

Matrices are sequences of three rows of three numbers.
"""

from __future__ import annotations

import math
from typing import Sequence

Matrix3 = list[list[float]]


def _sqrt_positive(value: float) -> float:
    if not value > 0:
        raise ValueError("matrix is not positive definite")
    return math.sqrt(value)


def _nonzero(value: float) -> float:
    if value == 0:
        raise ValueError("lower-triangular matrix is singular")
    return value


def mat33_chol(a: Sequence[Sequence[float]]) -> Matrix3:
    """Return the lower-triangular Cholesky factor L with ``L @ L.T == a``.

    Only the upper triangle of ``a`` is read.
    """
    (a00, a01, a02), (_, a11, a12), (_, _, a22) = a
    r00 = _sqrt_positive(a00)
    r10 = a01 / r00
    r20 = a02 / r00
    r11 = _sqrt_positive(a11 - r10 * r10)
    r21 = (a12 - r10 * r20) / r11
    r22 = _sqrt_positive(a22 - r20 * r20 - r21 * r21)
    return [
        [r00, 0.0, 0.0],
        [r10, r11, 0.0],
        [r20, r21, r22],
    ]


def mat33_lower_tri_inv(a: Sequence[Sequence[float]]) -> Matrix3:
    """Invert a lower-triangular 3x3 matrix."""
    (a00, _, _), (a10, a11, _), (a20, a21, a22) = a
    r00 = 1 / _nonzero(a00)
    r10 = -a10 * r00 / _nonzero(a11)
    r11 = 1 / a11
    r20 = (-a20 * r00 - a21 * r10) / _nonzero(a22)
    r21 = -a21 * r11 / a22
    r22 = 1 / a22
    return [
        [r00, 0.0, 0.0],
        [r10, r11, 0.0],
        [r20, r21, r22],
    ]


def mat33_sym_solve(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve ``a @ x == b`` for symmetric positive-definite ``a``."""
    m = mat33_lower_tri_inv(mat33_chol(a))
    b0, b1, b2 = b
    t0 = m[0][0] * b0
    t1 = m[1][0] * b0 + m[1][1] * b1
    t2 = m[2][0] * b0 + m[2][1] * b1 + m[2][2] * b2
    return [
        m[0][0] * t0 + m[1][0] * t1 + m[2][0] * t2,
        m[1][1] * t1 + m[2][1] * t2,
        m[2][2] * t2,
    ]