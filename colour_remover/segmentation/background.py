from __future__ import annotations

from colour_remover.errors import InvalidImage
from colour_remover.image.buffer import PixelBuffer
from colour_remover.image.colour import Colour


def detect_background(buffer: PixelBuffer) -> Colour:
    """Return the colour of the top-left pixel, assumed to be the background.

    Doxygen:
    - @param buffer: Image to inspect; not modified.
    - @return: Colour at (0, 0).
    - @throws InvalidImage: If the image has zero width or height.
    """
    if buffer.is_empty():
        raise InvalidImage(f"Image has no pixels ({buffer.width}x{buffer.height})")
    return buffer.get(0, 0)
