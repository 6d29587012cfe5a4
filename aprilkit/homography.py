"""Estimate the planar homography that maps one set of 2-D points onto another."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


def _design_rows(world: np.ndarray, image: np.ndarray) -> np.ndarray:
    """Return the three linear constraint rows contributed by each correspondence."""
    wx, wy = world[:, 0], world[:, 1]
    ix, iy = image[:, 0], image[:, 1]
    zeros = np.zeros_like(wx)
    ones = np.ones_like(wx)

    row0 = np.stack([zeros, zeros, zeros, -wx, -wy, -ones, wx * iy, wy * iy, iy], axis=1)
    row1 = np.stack([wx, wy, ones, zeros, zeros, zeros, -wx * ix, -wy * ix, -ix], axis=1)
    row2 = np.stack([-wx * iy, -wy * iy, -iy, wx * ix, wy * ix, ix, zeros, zeros, zeros], axis=1)
    return np.concatenate([row0, row1, row2], axis=0)


def homography_compute(
    correspondences: Iterable[Sequence[float]], use_inverse: bool = False
) -> np.ndarray:
    """Compute the 3x3 homography ``H`` such that ``y = H x``.

    Each correspondence is ``(a, b, c, d)`` with ``x = (a, b)`` and
    ``y = (c, d)``; values are taken at single precision. Both point sets
    are centred on their centroids before solving. By default the null
    vector is found by singular value decomposition; with ``use_inverse``
    it is read from the first column of the inverted information matrix,
    which is faster but less accurate.
    """
    data = np.asarray(list(correspondences), dtype=np.float32).astype(np.float64)
    if data.size == 0:
        raise ValueError("at least one correspondence is required")
    if data.ndim != 2 or data.shape[1] != 4:
        raise ValueError("each correspondence must hold four numbers")

    x_cx, x_cy, y_cx, y_cy = data.mean(axis=0)
    world = data[:, 0:2] - (x_cx, x_cy)
    image = data[:, 2:4] - (y_cx, y_cy)

    rows = _design_rows(world, image)
    info = rows.T @ rows

    if use_inverse:
        try:
            inv = np.linalg.inv(info)
        except np.linalg.LinAlgError as exc:
            raise ValueError("information matrix is singular") from exc
        col = inv[:, 0]
        scale = np.sqrt(np.sum(col * col))
        if scale == 0 or not np.isfinite(scale):
            raise ValueError("information matrix is singular")
        h = (col / scale).reshape(3, 3)
    else:
        u, _, _ = np.linalg.svd(info)
        h = u[:, 8].reshape(3, 3)

    tx = np.eye(3)
    tx[0, 2] = -x_cx
    tx[1, 2] = -x_cy

    ty = np.eye(3)
    ty[0, 2] = y_cx
    ty[1, 2] = y_cy

    return ty @ h @ tx


def homography_project(h, x: float, y: float) -> tuple[float, float]:
    """Map the point ``(x, y)`` through homography ``h``."""
    H = np.asarray(h, dtype=float)
    if H.shape != (3, 3):
        raise ValueError("homography must be 3x3")
    xx = H[0, 0] * x + H[0, 1] * y + H[0, 2]
    yy = H[1, 0] * x + H[1, 1] * y + H[1, 2]
    zz = H[2, 0] * x + H[2, 1] * y + H[2, 2]
    return float(xx / zz), float(yy / zz)