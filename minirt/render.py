"""Rendering a scene into an in-memory image and writing it out as PPM."""

from __future__ import annotations

import os
from pathlib import Path

from minirt.scene import Scene
from minirt.shading import compute_pixel

WIDTH = 1200
HEIGHT = 700
BACKGROUND = 0xF0E68C


class Image:
    """A width x height grid of 0xRRGGBB pixels, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [[0] * width for _ in range(height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self._pixels[y][x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of one pixel as 0xRRGGBB."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self._pixels[y][x]

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6) file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for row in self._pixels:
            for color in row:
                body.extend(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        return header + bytes(body)

    def save_ppm(self, path: str | os.PathLike[str]) -> None:
        """Write the image to ``path`` as a binary PPM file."""
        Path(path).write_bytes(self.to_ppm())


def render(scene: Scene, width: int = WIDTH, height: int = HEIGHT) -> Image:
    """Trace one ray per pixel; pixels whose ray misses keep the background colour."""
    image = Image(width, height)
    aspect_ratio = width / height
    for y in range(height):
        ndc_y = 1.0 - (2.0 * y / height)
        for x in range(width):
            ndc_x = (2.0 * x / width - 1.0) * aspect_ratio
            color = compute_pixel(ndc_x, ndc_y, scene)
            image.put_pixel(x, y, BACKGROUND if color is None else color)
    return image