"""Emit a grayscale image as PostScript drawing commands."""

from __future__ import annotations

from typing import TextIO

from aprilkit.image_u8 import ImageU8

_PIXELS_PER_LINE = 32


def postscript_image(f: TextIO, im: ImageU8) -> None:
    """Write PostScript that renders ``im`` at one pixel per unit, y axis up.

    The pixel data follows as hexadecimal, with a line break after every
    32 pixels of a row and one final line break.
    """
    f.write(f"/picstr {im.width} string def\n")
    f.write(f"{im.width} {im.height} 8 [1 0 0 1 0 0]\n")
    f.write("{currentfile picstr readhexstring pop}\nimage\n")

    parts: list[str] = []
    for row in im.buf[:, : im.width]:
        for x, value in enumerate(row):
            parts.append(f"{int(value):02x}")
            if x % _PIXELS_PER_LINE == _PIXELS_PER_LINE - 1:
                parts.append("\n")
    parts.append("\n")
    f.write("".join(parts))