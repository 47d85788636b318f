"""Rectangular buffers of pixels stored row by row."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .colors import ColorBGRA
from .enums import TextureFormat

DEFAULT_TRANSPARENT_IDX = 0
"""Palette index used for transparent pixels unless a palette says otherwise."""


class PixelBuffer:
    """A width x height grid of pixels, stored row by row."""

    format: TextureFormat = TextureFormat.ORIGINAL
    bytes_per_pixel: int = 1

    def __init__(self, width: int = 0, height: int = 0, default: Any = 0):
        if not 0 <= width <= 0xFFFF or not 0 <= height <= 0xFFFF:
            raise ValueError(f"invalid buffer size {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: list[Any] = [default] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> list[Any]:
        """The pixel list itself; changes to it change the buffer."""
        return self._pixels

    @property
    def num_pixels(self) -> int:
        return len(self._pixels)

    @property
    def size_in_bytes(self) -> int:
        return self.num_pixels * self.bytes_per_pixel

    def calc_idx(self, x: int, y: int) -> int:
        """Return the position of pixel (x, y) in the pixel list."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} buffer")
        return y * self._width + x

    def get(self, x: int, y: int) -> Any:
        """Return the pixel at (x, y)."""
        return self._pixels[self.calc_idx(x, y)]

    def set(self, x: int, y: int, value: Any) -> None:
        """Set the pixel at (x, y)."""
        self._pixels[self.calc_idx(x, y)] = value

    def clear(self) -> None:
        """Drop all pixels and set the size to 0x0."""
        self._pixels = []
        self._width = self._height = 0

    def rows(self) -> Iterator[list[Any]]:
        """Yield copies of the rows from top to bottom."""
        for start in range(0, len(self._pixels), self._width or 1):
            yield self._pixels[start:start + self._width]

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._pixels)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"


class PixelBufferBGRA(PixelBuffer):
    """A pixel buffer of BGRA colours."""

    format = TextureFormat.BGRA
    bytes_per_pixel = 4

    def __init__(self, width: int = 0, height: int = 0, default: ColorBGRA | None = None):
        super().__init__(width, height, ColorBGRA() if default is None else default)


class PixelBufferPaletted(PixelBuffer):
    """A pixel buffer of palette indices."""

    format = TextureFormat.PALETTED
    bytes_per_pixel = 1

    def __init__(self, width: int = 0, height: int = 0, default: int = DEFAULT_TRANSPARENT_IDX):
        if not 0 <= default <= 0xFF:
            raise ValueError(f"palette index out of range: {default}")
        super().__init__(width, height, default)


def flip_vertical(buffer: PixelBuffer) -> None:
    """Mirror the buffer in place so the top row becomes the bottom row."""
    if buffer.num_pixels == 0:
        return
    width = buffer.width
    pixels = buffer.pixels
    rows = [pixels[start:start + width] for start in range(0, len(pixels), width)]
    pixels[:] = [pixel for row in reversed(rows) for pixel in row]