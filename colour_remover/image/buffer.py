"""Mutable pixel grid used by the removal engine.

PixelBuffer wraps an ``(H, W, C)`` uint8 numpy array (RGB or RGBA). All
coordinates are ``(x, y)`` with x along the width, matching image tools; the
underlying array is indexed ``[y, x]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from colour_remover.errors import InvalidImage

from .colour import Colour, normalize_colour

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive box over pixel coordinates."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


class PixelBuffer:
    """2-D grid of colours with bounds-checked access.

    The array is used as-is (no copy), so callers that hand in an array they
    still need should pass ``array.copy()``.
    """

    def __init__(self, pixels: np.ndarray) -> None:
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise InvalidImage(f"Expected an (H, W, 3|4) array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            pixels = pixels.astype(np.uint8)
        self.pixels = pixels

    @classmethod
    def filled(cls, width: int, height: int, colour: Sequence[int]) -> "PixelBuffer":
        """Create a buffer of the given size where every pixel is ``colour``."""
        arr = np.empty((height, width, len(colour)), dtype=np.uint8)
        arr[:, :] = tuple(int(c) for c in colour)
        return cls(arr)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def channels(self) -> int:
        return int(self.pixels.shape[2])

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def get(self, x: int, y: int) -> Colour:
        self._check(x, y)
        return tuple(int(c) for c in self.pixels[y, x])

    def set(self, x: int, y: int, colour: Sequence[int]) -> None:
        self._check(x, y)
        self.pixels[y, x] = normalize_colour(colour, self.channels)

    def mask_of(self, colour: Sequence[int]) -> np.ndarray:
        """Return an (H, W) bool array, True where the pixel equals ``colour`` exactly."""
        target = np.array(normalize_colour(colour, self.channels), dtype=np.uint8)
        return np.all(self.pixels == target, axis=-1)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.pixels.copy())

    def crop(self, box: BoundingBox) -> "PixelBuffer":
        """Copy of the inclusive sub-grid described by ``box``."""
        self._check(box.min_x, box.min_y)
        self._check(box.max_x, box.max_y)
        return PixelBuffer(self.pixels[box.min_y:box.max_y + 1, box.min_x:box.max_x + 1].copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and bool(np.array_equal(self.pixels, other.pixels))

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height}, channels={self.channels})"
