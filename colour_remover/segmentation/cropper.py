"""Crop an image to the pixels that differ from its background."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from colour_remover.image.buffer import BoundingBox, PixelBuffer


def find_content_bounds(buffer: PixelBuffer, background: Sequence[int]) -> Optional[BoundingBox]:
    """Bounding box of all non-background pixels, or None if there are none."""
    content = ~buffer.mask_of(background)
    rows = np.flatnonzero(content.any(axis=1))
    if rows.size == 0:
        return None
    cols = np.flatnonzero(content.any(axis=0))
    return BoundingBox(int(cols[0]), int(rows[0]), int(cols[-1]), int(rows[-1]))


def crop_to_content(buffer: PixelBuffer, background: Sequence[int]) -> Optional[PixelBuffer]:
    """Return a cropped copy of ``buffer``; None when it is all background."""
    box = find_content_bounds(buffer, background)
    if box is None:
        return None
    return buffer.crop(box)
