from __future__ import annotations

from typing import Optional, Sequence

from colour_remover.image.buffer import PixelBuffer
from colour_remover.image.colour import normalize_colour

from .regions import Region


def erase_region(
    buffer: PixelBuffer,
    region: Region,
    background: Sequence[int],
    extraction: Optional[PixelBuffer] = None,
) -> None:
    """Overwrite a region with the background colour, in place.

    If ``extraction`` is given, the region's own colour is written there at the
    same coordinates, so it ends up holding exactly the removed pixels.

    Doxygen:
    - @param buffer: Working image, mutated.
    - @param region: Region selected for removal.
    - @param background: Fill colour.
    - @param extraction: Optional buffer of the same size recording removed pixels.
    """
    buffer.pixels[region.ys, region.xs] = normalize_colour(background, buffer.channels)
    if extraction is not None:
        extraction.pixels[region.ys, region.xs] = normalize_colour(region.colour, extraction.channels)
