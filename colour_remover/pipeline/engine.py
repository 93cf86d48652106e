"""Colour removal over one in-memory image.

The engine ties the segmentation steps together:

1. take the background from the top-left pixel;
2. raster-scan (row-major) for target-colour pixels not yet visited;
3. flood-fill each such pixel's region and mark it visited;
4. erase regions with ``size >= threshold`` (recording them in the
   extraction buffer when asked);
5. crop to the remaining content in crop mode.

All inputs are validated before the image is touched, so a rejected call
leaves the buffer unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from colour_remover.image.buffer import BoundingBox, PixelBuffer
from colour_remover.image.colour import Colour, normalize_colour, validate_colour
from colour_remover.segmentation import (
    ComponentScanner,
    detect_background,
    erase_region,
    find_content_bounds,
    new_visited,
    should_remove,
    validate_threshold,
)


class RemovalMode(Enum):
    ERASE_ONLY = "erase"
    ERASE_AND_EXTRACT = "extract"
    ERASE_AND_CROP = "crop"

    @classmethod
    def parse(cls, value: Union[str, "RemovalMode"]) -> "RemovalMode":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown removal mode: {value!r} (expected one of: erase, extract, crop)")


@dataclass
class RemovalResult:
    """Output of one engine run plus what happened along the way."""

    image: PixelBuffer
    background: Colour
    extraction: Optional[PixelBuffer] = None
    bounding_box: Optional[BoundingBox] = None
    removed_regions: List[int] = field(default_factory=list)
    kept_regions: List[int] = field(default_factory=list)

    @property
    def removed_pixels(self) -> int:
        return sum(self.removed_regions)


class ColourRemovalEngine:
    """Removes large regions of one colour; holds no per-image state."""

    def __init__(
        self,
        target: Sequence[int],
        threshold: int,
        mode: Union[str, RemovalMode] = RemovalMode.ERASE_ONLY,
    ) -> None:
        self.target = validate_colour(target)
        self.threshold = validate_threshold(threshold)
        self.mode = RemovalMode.parse(mode)

    def run(self, image: PixelBuffer) -> RemovalResult:
        """Process ``image`` in place and return the result bundle.

        Doxygen:
        - @param image: Decoded image; mutated.
        - @return: RemovalResult; ``image`` is the input buffer, or a cropped copy in crop mode.
        - @throws InvalidImage: If the image has zero width or height.
        - @throws InvalidColour: If the target colour does not fit the image channels.
        """
        background = detect_background(image)
        target = normalize_colour(self.target, image.channels)

        extraction: Optional[PixelBuffer] = None
        if self.mode is RemovalMode.ERASE_AND_EXTRACT:
            extraction = PixelBuffer.filled(image.width, image.height, background)

        scanner = ComponentScanner(image, target)
        visited = new_visited(image)
        result = RemovalResult(image=image, background=background, extraction=extraction)

        # argwhere yields (y, x) pairs in row-major order
        for y, x in np.argwhere(scanner.matches):
            if visited[y, x]:
                continue
            region = scanner.scan((int(x), int(y)), visited)
            if not should_remove(region, self.threshold):
                result.kept_regions.append(region.size)
                continue
            erase_region(image, region, background, extraction)
            result.removed_regions.append(region.size)

        if self.mode is RemovalMode.ERASE_AND_CROP:
            result.bounding_box = find_content_bounds(image, background)
            if result.bounding_box is not None:
                result.image = image.crop(result.bounding_box)
        return result


def process(
    image: PixelBuffer,
    target: Sequence[int],
    threshold: int,
    mode: Union[str, RemovalMode] = RemovalMode.ERASE_ONLY,
) -> Union[PixelBuffer, Tuple[PixelBuffer, PixelBuffer]]:
    """Remove regions of ``target`` with at least ``threshold`` pixels from ``image``.

    Returns the processed buffer, or ``(processed, extraction)`` in
    ERASE_AND_EXTRACT mode. In ERASE_AND_CROP mode an image with nothing left
    but background is returned uncropped, which looks the same as content
    spanning the whole canvas; use ``ColourRemovalEngine.run`` and check
    ``RemovalResult.bounding_box`` (None when empty) to tell them apart.
    """
    engine = ColourRemovalEngine(target, threshold, mode)
    result = engine.run(image)
    if engine.mode is RemovalMode.ERASE_AND_EXTRACT:
        return result.image, result.extraction
    return result.image


__all__ = [
    "ColourRemovalEngine",
    "RemovalMode",
    "RemovalResult",
    "process",
]
