"""Colour values: parsing user input and matching channel layouts."""

from __future__ import annotations

from typing import Sequence, Tuple

from colour_remover.errors import InvalidColour

Colour = Tuple[int, ...]

OPAQUE = 255


def parse_colour(text: str) -> Colour:
    """Parse an ``"R,G,B"`` string into a colour tuple.

    Doxygen:
    - @param text: Three comma-separated integers, whitespace allowed.
    - @return: (r, g, b) tuple.
    - @throws InvalidColour: If the triple is malformed or a channel is outside 0..255.
    """
    parts = [p.strip() for p in (text or "").split(",")]
    if len(parts) != 3:
        raise InvalidColour(f"Colour must be of the form R,G,B: {text!r}")
    channels = []
    for p in parts:
        try:
            value = int(p)
        except ValueError:
            raise InvalidColour(f"Colour channel is not a valid integer: {p!r}")
        if value < 0 or value > 255:
            raise InvalidColour(f"Colour channel out of range 0..255: {value}")
        channels.append(value)
    return tuple(channels)


def format_colour(colour: Sequence[int]) -> str:
    return ",".join(str(int(c)) for c in colour)


def validate_colour(colour: Sequence[int]) -> Colour:
    """Check an already-built colour and return it as a plain int tuple."""
    if len(colour) not in (3, 4):
        raise InvalidColour(f"Colour must have 3 or 4 channels, got {len(colour)}")
    out = tuple(int(c) for c in colour)
    if any(c < 0 or c > 255 for c in out):
        raise InvalidColour(f"Colour channel out of range 0..255: {out}")
    return out


def normalize_colour(colour: Sequence[int], channels: int) -> Colour:
    """Bring a colour to the channel count of a buffer.

    An RGB colour is widened with an opaque alpha for RGBA buffers; an RGBA
    colour is only narrowed to RGB when it is opaque.
    """
    out = tuple(int(c) for c in colour)
    if len(out) == channels:
        return out
    if len(out) == 3 and channels == 4:
        return out + (OPAQUE,)
    if len(out) == 4 and channels == 3 and out[3] == OPAQUE:
        return out[:3]
    raise InvalidColour(f"Colour {out} does not fit a {channels}-channel image")
