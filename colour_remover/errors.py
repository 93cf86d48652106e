"""Typed errors raised by the colour removal core and its I/O helpers."""

from __future__ import annotations


class ColourRemovalError(ValueError):
    """Base class for rejected inputs (bad image, threshold or colour)."""


class InvalidImage(ColourRemovalError):
    """Image has zero width or height, or an unsupported pixel layout."""


class InvalidThreshold(ColourRemovalError):
    """Region size threshold is not an integer >= 1."""


class InvalidColour(ColourRemovalError):
    """Colour is not a well-formed triple of 0..255 channels."""


class ImageIOError(RuntimeError):
    """Base class for failures while reading or writing image files."""


class ImageDecodeError(ImageIOError):
    pass


class ImageEncodeError(ImageIOError):
    pass
