"""Pixel buffers, colour values and image file I/O."""

from .buffer import BoundingBox, Coordinate, PixelBuffer
from .colour import Colour, format_colour, normalize_colour, parse_colour, validate_colour
from .io import load_image, save_image

__all__ = [
    "BoundingBox",
    "Colour",
    "Coordinate",
    "PixelBuffer",
    "format_colour",
    "normalize_colour",
    "parse_colour",
    "validate_colour",
    "load_image",
    "save_image",
]
