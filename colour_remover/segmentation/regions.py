"""Connected-region discovery and size filtering.

Regions are 4-connected: a pixel touches its left, right, top and bottom
neighbours only, never the diagonals. The flood fill keeps its own work list
so region size is not limited by the interpreter's recursion depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

import numpy as np

from colour_remover.errors import InvalidThreshold
from colour_remover.image.buffer import BoundingBox, Coordinate, PixelBuffer
from colour_remover.image.colour import Colour, normalize_colour

NEIGHBOUR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class Region:
    """Maximal set of connected pixels sharing ``colour``."""

    colour: Colour
    xs: np.ndarray
    ys: np.ndarray

    @property
    def size(self) -> int:
        return int(self.xs.size)

    def coordinates(self) -> List[Coordinate]:
        return list(zip(self.xs.tolist(), self.ys.tolist()))

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(
            int(self.xs.min()),
            int(self.ys.min()),
            int(self.xs.max()),
            int(self.ys.max()),
        )


class RegionDecision(Enum):
    KEEP = "keep"
    REMOVE = "remove"


def new_visited(buffer: PixelBuffer) -> np.ndarray:
    """Empty visited bitset for one full scan of ``buffer``."""
    return np.zeros((buffer.height, buffer.width), dtype=bool)


class ComponentScanner:
    """Flood-fills regions of one target colour in one buffer.

    ``matches`` is the exact-match mask taken when the scanner is built and is
    only meant for seeding a raster pass. ``scan`` always compares against the
    buffer's current pixels.
    """

    def __init__(self, buffer: PixelBuffer, target: Sequence[int]) -> None:
        self.buffer = buffer
        self.target = normalize_colour(target, buffer.channels)
        self.matches = buffer.mask_of(self.target)
        self._target_bytes = np.array(self.target, dtype=np.uint8).tobytes()

    def _is_target(self, x: int, y: int) -> bool:
        return self.buffer.pixels[y, x].tobytes() == self._target_bytes

    def scan(self, start: Coordinate, visited: np.ndarray) -> Region:
        """Return the region containing ``start`` and mark its members in ``visited``.

        Doxygen:
        - @param start: (x, y) of an unvisited pixel with the target colour.
        - @param visited: (H, W) bool array shared across scans; updated in place.
        - @return: Region with every connected target pixel.
        - @throws ValueError: If ``start`` does not hold the target colour or is already visited.
        """
        x0, y0 = start
        if not self.buffer.in_bounds(x0, y0) or not self._is_target(x0, y0):
            raise ValueError(f"Start pixel ({x0}, {y0}) does not have colour {self.target}")
        if visited[y0, x0]:
            raise ValueError(f"Start pixel ({x0}, {y0}) already belongs to a scanned region")

        width, height = self.buffer.width, self.buffer.height
        is_target = self._is_target
        xs: List[int] = [x0]
        ys: List[int] = [y0]
        visited[y0, x0] = True
        stack = [(x0, y0)]
        while stack:
            x, y = stack.pop()
            for dx, dy in NEIGHBOUR_OFFSETS:
                nx, ny = x + dx, y + dy
                if nx < 0 or ny < 0 or nx >= width or ny >= height:
                    continue
                if visited[ny, nx] or not is_target(nx, ny):
                    continue
                visited[ny, nx] = True
                xs.append(nx)
                ys.append(ny)
                stack.append((nx, ny))

        return Region(
            colour=self.target,
            xs=np.array(xs, dtype=np.intp),
            ys=np.array(ys, dtype=np.intp),
        )


def find_connected_region(
    buffer: PixelBuffer,
    target: Sequence[int],
    start: Coordinate,
    visited: Optional[np.ndarray] = None,
) -> Region:
    """One-off scan; builds a fresh visited set when none is given."""
    if visited is None:
        visited = new_visited(buffer)
    return ComponentScanner(buffer, target).scan(start, visited)


def validate_threshold(threshold: int) -> int:
    if isinstance(threshold, bool) or not isinstance(threshold, (int, np.integer)):
        raise InvalidThreshold(f"Threshold must be an integer, got {threshold!r}")
    if threshold < 1:
        raise InvalidThreshold(f"Threshold must be >= 1, got {threshold}")
    return int(threshold)


def should_remove(region: Union[Region, int], threshold: int) -> bool:
    """True when the region is large enough to erase (``size >= threshold``)."""
    threshold = validate_threshold(threshold)
    size = region.size if isinstance(region, Region) else int(region)
    return size >= threshold


def classify_region(region: Region, threshold: int) -> RegionDecision:
    return RegionDecision.REMOVE if should_remove(region, threshold) else RegionDecision.KEEP
