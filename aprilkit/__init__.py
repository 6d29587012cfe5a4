"""Grayscale images, 2D geometry, small linear algebra and homography estimation."""

__version__ = "0.1.0"

__all__ = [
    "homography",
    "hull",
    "image_u8",
    "linalg33",
    "lines",
    "polygons",
    "postscript",
    "vectors",
]