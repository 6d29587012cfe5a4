# aprilkit

Building blocks for fiducial tag work. The package has an 8-bit grayscale
image type, 2D line and polygon geometry, small vector and matrix helpers,
and homography estimation from point correspondences.

## Install

```
pip install aprilkit
```

The only runtime dependency is numpy.

## Modules

- `aprilkit.image_u8`: `ImageU8` is a grayscale image. Its pixels sit in a
  `(height, stride)` uint8 array, `buf`, and the stride is aligned to 96 bytes
  by default (`ImageU8.create`) or set explicitly (`ImageU8.with_stride`).
  - Pixel access and copying: `get`, `set`, `copy`.
  - `write_pnm` writes a binary PGM (P5) file.
  - Drawing: `draw_line`, `draw_circle`, `draw_annulus`.
  - Filtering: `darken`, `convolve_2d` (a separable 8-bit kernel) and
    `gaussian_blur`.
  - Resampling: `rotate` about the centre, and `decimate` (a factor of 1.5
    uses a weighted 3x3 filter; integer factors subsample).
  - `fill_line_max` raises pixels near a segment to values from a distance
    lookup table, `Lut`.
- `aprilkit.postscript`: `postscript_image(f, im)` writes PostScript commands
  that render an `ImageU8`, with the pixel data as hexadecimal.
- `aprilkit.linalg33`: `mat33_chol`, `mat33_lower_tri_inv` and
  `mat33_sym_solve` factor and solve symmetric positive-definite 3x3 systems.
  They raise `ValueError` when the matrix is not positive definite.
- `aprilkit.vectors`: vector arithmetic (`add`, `subtract`, `scale`, `dot`,
  `distance`, `magnitude`, `normalize`, `cross_product`, `cross_matrix`, …)
  and small matrix products (`mat_ab`, `mat_abt`, `mat_atb`, `mat_abc`,
  `mat_ab_vector`, `mat_add`) on plain lists.
- `aprilkit.lines`: `Line` and `LineSegment` in the plane. They give
  coordinates along a line, the closest point on a segment, and
  line/segment intersections. An intersection is returned as a point, or as
  `None` when there is none.
- `aprilkit.polygons`: `polygon_make_ccw`, `polygon_contains_point` (with the
  slower `polygon_contains_point_ref`), `polygon_intersects_polygon`,
  `polygon_contains_polygon`, `polygon_interior_point` and
  `polygon_overlaps_polygon`.
- `aprilkit.hull`: `convex_hull` (gift wrapping, counter-clockwise, colinear
  points dropped), `polygon_closest_boundary_point` and `polygon_rasterize`.
  `polygon_rasterize` returns the sorted x crossings of a horizontal line.
- `aprilkit.homography`: `homography_compute(correspondences, use_inverse)`
  returns a 3x3 numpy array `H` with `y = H x`. Each correspondence is
  `(x0, x1, y0, y1)`. `homography_project(h, x, y)` maps a point through `H`.

## Example

```python
from aprilkit.image_u8 import ImageU8
from aprilkit.homography import homography_compute, homography_project
from aprilkit.polygons import polygon_contains_point

im = ImageU8.create(64, 48, 96)
im.draw_line(0, 0, 63, 47, 255, 1)
im.gaussian_blur(1.0, 5)
im.write_pnm("line.pgm")

square = [(0, 0), (4, 0), (4, 4), (0, 4)]
print(polygon_contains_point(square, (1, 1)))   # True

corr = [(-1, -1, 10, 10), (1, -1, 30, 10), (1, 1, 30, 30), (-1, 1, 10, 30)]
h = homography_compute(corr, False)
print(homography_project(h, 0, 0))             # about (20.0, 20.0)
```

## What it does not do

- It does not detect tags. It only provides the image, geometry and
  homography pieces that detection builds on.
- It does not recover a camera pose from a homography.
- It has no quaternion, roll/pitch/yaw or 4x4 rigid-transform conversions.
- It reads no image files; `ImageU8` can only write PGM.
- It provides no command-line program.

## Tests

```
pip install -e .[test]
pytest
```