"""Single-channel 8-bit images with row stride, drawing and filtering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

DEFAULT_ALIGNMENT = 96


@dataclass(frozen=True)
class Lut:
    """Look-up table indexed by ``int(squared_distance * scale)``.

    Indices at or beyond ``len(values)`` are not drawn.
    """

    scale: float
    values: bytes


def _iclamp(v: float, lo: int, hi: int) -> int:
    iv = int(v)
    return max(lo, min(iv, hi))


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"pixel value {value} outside 0..255")
    return int(value)


def _convolve(line: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Convolve one row or column; border samples are copied unchanged."""
    x = np.asarray(line, dtype=np.int64)
    out = x.copy()
    sz, ksz = len(x), len(kernel)
    if sz > ksz:
        acc = np.correlate(x, kernel, mode="valid")[: sz - ksz]
        half = ksz // 2
        out[half : half + sz - ksz] = (acc >> 8) & 0xFF
    return out.astype(np.uint8)


class ImageU8:
    """A grayscale image whose rows are ``stride`` bytes apart.

    ``buf`` is a ``(height, stride)`` uint8 array; only the first
    ``width`` columns of each row hold pixels.
    """

    def __init__(self, width: int, height: int, stride: int, buf: np.ndarray | None = None):
        if width < 0 or height < 0:
            raise ValueError("image dimensions must be non-negative")
        if stride < width:
            raise ValueError("stride must be at least the width")
        self.width = int(width)
        self.height = int(height)
        self.stride = int(stride)
        if buf is None:
            buf = np.zeros((self.height, self.stride), dtype=np.uint8)
        elif buf.shape != (self.height, self.stride):
            raise ValueError("buffer shape does not match image geometry")
        self.buf = buf

    def __repr__(self) -> str:
        return f"ImageU8(width={self.width}, height={self.height}, stride={self.stride})"

    @classmethod
    def create(cls, width: int, height: int, alignment: int = DEFAULT_ALIGNMENT) -> "ImageU8":
        """Create a zeroed image whose stride is a multiple of ``alignment``."""
        if alignment <= 0:
            raise ValueError("alignment must be positive")
        stride = width
        if stride % alignment:
            stride += alignment - stride % alignment
        return cls.with_stride(width, height, stride)

    @classmethod
    def with_stride(cls, width: int, height: int, stride: int) -> "ImageU8":
        """Create a zeroed image with an explicit stride."""
        return cls(width, height, stride)

    def _check_xy(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def get(self, x: int, y: int) -> int:
        self._check_xy(x, y)
        return int(self.buf[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        self._check_xy(x, y)
        self.buf[y, x] = _check_byte(value)

    def copy(self) -> "ImageU8":
        return ImageU8(self.width, self.height, self.stride, self.buf.copy())

    def write_pnm(self, path) -> None:
        """Write the image as a binary grayscale PGM (P5) file."""
        with open(path, "wb") as f:
            f.write(f"P5\n{self.width} {self.height}\n255\n".encode("ascii"))
            f.write(np.ascontiguousarray(self.buf[:, : self.width]).tobytes())

    def draw_circle(self, x0: float, y0: float, r: float, v: int) -> None:
        """Fill pixels within squared distance ``r*r`` of the centre."""
        r2 = r * r
        v &= 0xFF
        for y in range(int(y0 - r2), math.floor(y0 + r2) + 1):
            for x in range(int(x0 - r2), math.floor(x0 + r2) + 1):
                d = (x - x0) * (x - x0) + (y - y0) * (y - y0)
                if d > r2:
                    continue
                if 0 <= x < self.width and 0 <= y < self.height:
                    self.buf[y, x] = v

    def draw_annulus(self, x0: float, y0: float, r0: float, r1: float, v: int) -> None:
        """Fill pixels whose squared distance lies in ``[r0*r0, r1*r1]``."""
        r0 = r0 * r0
        r1 = r1 * r1
        if not r0 < r1:
            raise ValueError("inner radius must be smaller than outer radius")
        v &= 0xFF
        for y in range(int(y0 - r1), math.floor(y0 + r1) + 1):
            for x in range(int(x0 - r1), math.floor(x0 + r1) + 1):
                d = (x - x0) * (x - x0) + (y - y0) * (y - y0)
                if d < r0 or d > r1:
                    continue
                if 0 <= x < self.width and 0 <= y < self.height:
                    self.buf[y, x] = v

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, v: int, width: int = 1) -> None:
        """Draw a line by stepping half a pixel at a time; widths above 1 draw a 2x2 brush."""
        dist = math.sqrt((y1 - y0) * (y1 - y0) + (x1 - x0) * (x1 - x0))
        delta = 0.5 / dist if dist > 0 else math.inf
        v &= 0xFF
        flat = self.buf.reshape(-1)
        size = flat.size
        f = 0.0
        while f <= 1:
            x = int(x1 + (x0 - x1) * f)
            y = int(y1 + (y0 - y1) * f)
            f += delta
            if x < 0 or y < 0 or x >= self.width or y >= self.height:
                continue
            idx = y * self.stride + x
            flat[idx] = v
            if width > 1:
                for extra in (idx + 1, idx + self.stride, idx + 1 + self.stride):
                    if extra < size:
                        flat[extra] = v

    def darken(self) -> None:
        """Halve every pixel value."""
        self.buf[:, : self.width] //= 2

    def convolve_2d(self, kernel: Sequence[int]) -> None:
        """Apply a separable 8-bit kernel (weights sum to about 256) along rows then columns."""
        k = np.asarray(list(kernel), dtype=np.int64)
        if len(k) % 2 != 1:
            raise ValueError("kernel size must be odd")
        if np.any(k < 0) or np.any(k > 255):
            raise ValueError("kernel weights must lie in 0..255")
        for y in range(self.height):
            self.buf[y, : self.width] = _convolve(self.buf[y, : self.width], k)
        for x in range(self.width):
            self.buf[:, x] = _convolve(self.buf[:, x], k)

    def gaussian_blur(self, sigma: float, ksz: int) -> None:
        """Blur with a Gaussian kernel of odd size ``ksz``; ``sigma == 0`` is a no-op."""
        if sigma == 0:
            return
        if ksz % 2 != 1:
            raise ValueError("kernel size must be odd")
        half = ksz // 2
        dk = [math.exp(-0.5 * ((i - half) / sigma) ** 2) for i in range(ksz)]
        total = sum(dk)
        kernel = [int(d / total * 255) for d in dk]
        self.convolve_2d(kernel)

    def rotate(self, rad: float, pad: int = 0) -> "ImageU8":
        """Return the image rotated by ``rad`` (y up) about its centre, padding with ``pad``."""
        pad = _check_byte(pad)
        f32 = np.float32
        rad = -rad
        c = f32(math.cos(rad))
        s = f32(math.sin(rad))
        iwidth, iheight = self.width, self.height
        icx = f32(iwidth / 2.0)
        icy = f32(iheight / 2.0)

        corners = np.array(
            [[0, 0], [iwidth, 0], [iwidth, iheight], [0, iheight]], dtype=np.float32
        )
        px = corners[:, 0] - icx
        py = corners[:, 1] - icy
        nx = px * c - py * s
        ny = px * s + py * c
        owidth = int(math.ceil(float(nx.max() - nx.min())))
        oheight = int(math.ceil(float(ny.max() - ny.min())))

        out = ImageU8.create(owidth, oheight)
        sx = (np.arange(owidth) - owidth / 2.0 + 0.5).astype(np.float32)[None, :]
        sy = (np.arange(oheight) - oheight / 2.0 + 0.5).astype(np.float32)[:, None]
        ix = np.floor(sx * c + sy * s + icx).astype(np.int64)
        iy = np.floor(-sx * s + sy * c + icy).astype(np.int64)
        valid = (ix >= 0) & (iy >= 0) & (ix < iwidth) & (iy < iheight)

        vals = np.full((oheight, owidth), pad, dtype=np.uint8)
        vals[valid] = self.buf[iy[valid], ix[valid]]
        out.buf[:, :owidth] = vals
        return out

    def decimate(self, factor: float) -> "ImageU8":
        """Shrink by ``factor``: 1.5 uses a weighted 3x3 filter, others subsample."""
        width, height = self.width, self.height
        if factor == 1.5:
            nx, ny = width // 3, height // 3
            out = ImageU8.create(nx * 2, ny * 2)
            src = self.buf.astype(np.int64)

            def cell(dy: int, dx: int) -> np.ndarray:
                return src[dy : dy + 3 * ny : 3, dx : dx + 3 * nx : 3]

            a, b, c = cell(0, 0), cell(0, 1), cell(0, 2)
            d, e, f = cell(1, 0), cell(1, 1), cell(1, 2)
            g, h, i = cell(2, 0), cell(2, 1), cell(2, 2)
            dst = out.buf
            dst[0 : 2 * ny : 2, 0 : 2 * nx : 2] = (4 * a + 2 * b + 2 * d + e) // 9
            dst[0 : 2 * ny : 2, 1 : 2 * nx : 2] = (4 * c + 2 * b + 2 * f + e) // 9
            dst[1 : 2 * ny : 2, 0 : 2 * nx : 2] = (4 * g + 2 * d + 2 * h + e) // 9
            dst[1 : 2 * ny : 2, 1 : 2 * nx : 2] = (4 * i + 2 * f + 2 * h + e) // 9
            return out

        step = int(factor)
        if step < 1:
            raise ValueError("decimation factor must be 1.5 or at least 1")
        swidth = 1 + (width - 1) // step
        sheight = 1 + (height - 1) // step
        out = ImageU8.create(swidth, sheight)
        sampled = self.buf[0:height:step, 0:width:step]
        out.buf[: sampled.shape[0], : sampled.shape[1]] = sampled
        return out

    def fill_line_max(self, lut: Lut, xy0: Sequence[float], xy1: Sequence[float]) -> None:
        """Raise pixels near segment ``xy0``-``xy1`` to the LUT value for their distance."""
        nvalues = len(lut.values)
        max_dist = math.sqrt((nvalues - 1) / lut.scale)

        theta = math.atan2(xy1[1] - xy0[1], xy1[0] - xy0[0])
        v = math.sin(theta)
        u = math.cos(theta)

        ix0 = _iclamp(min(xy0[0], xy1[0]) - max_dist, 0, self.width - 1)
        ix1 = _iclamp(max(xy0[0], xy1[0]) + max_dist, 0, self.width - 1)
        iy0 = _iclamp(min(xy0[1], xy1[1]) - max_dist, 0, self.height - 1)
        iy1 = _iclamp(max(xy0[1], xy1[1]) + max_dist, 0, self.height - 1)

        end_coord = (xy1[0] - xy0[0]) * u + (xy1[1] - xy0[1]) * v
        min_coord = min(0.0, end_coord)
        max_coord = max(0.0, end_coord)

        for iy in range(iy0, iy1 + 1):
            y = iy + 0.5
            for ix in range(ix0, ix1 + 1):
                x = ix + 0.5
                coord = (x - xy0[0]) * u + (y - xy0[1]) * v
                coord = min(max(coord, min_coord), max_coord)
                px = xy0[0] + coord * u
                py = xy0[1] + coord * v
                dist2 = (x - px) * (x - px) + (y - py) * (y - py)
                idx = int(dist2 * lut.scale)
                if idx >= nvalues:
                    continue
                value = lut.values[idx]
                if value > self.buf[iy, ix]:
                    self.buf[iy, ix] = value