"""Reading and writing image files as PixelBuffers.

OpenCV handles BMP/JPEG/PNG; Pillow is used for formats OpenCV cannot
decode (GIF). Buffers are always RGB or RGBA, never OpenCV's BGR order.
"""

from __future__ import annotations

import os
from typing import Union

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from colour_remover.errors import ImageDecodeError, ImageEncodeError

from .buffer import PixelBuffer

PathLike = Union[str, "os.PathLike[str]"]


def _read_with_opencv(path: str, keep_alpha: bool) -> np.ndarray | None:
    if keep_alpha:
        arr = cv2.imread(path, cv2.IMREAD_UNCHANGED)
        if arr is not None and arr.ndim == 3 and arr.shape[2] == 4 and arr.dtype == np.uint8:
            return cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
    arr = cv2.imread(path, cv2.IMREAD_COLOR)
    if arr is None:
        return None
    rgb = cv2.cvtColor(arr, cv2.COLOR_BGR2RGB)
    if keep_alpha:
        return cv2.cvtColor(rgb, cv2.COLOR_RGB2RGBA)
    return rgb


def _read_with_pillow(path: str, keep_alpha: bool) -> np.ndarray:
    try:
        with Image.open(path) as img:
            converted = img.convert("RGBA" if keep_alpha else "RGB")
            return np.array(converted, dtype=np.uint8)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageDecodeError(f"Failed to load image: {path}") from exc


def load_image(path: PathLike, keep_alpha: bool = False) -> PixelBuffer:
    """Decode an image file into a PixelBuffer.

    Doxygen:
    - @param path: Path to a BMP, JPEG, GIF or PNG file.
    - @param keep_alpha: Load RGBA instead of RGB.
    - @return: PixelBuffer owning a fresh array.
    - @throws FileNotFoundError: If the file does not exist.
    - @throws ImageDecodeError: If neither OpenCV nor Pillow can decode it.
    """
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Image file not found: {path}")

    arr = _read_with_opencv(path, keep_alpha)
    if arr is None:
        arr = _read_with_pillow(path, keep_alpha)
    return PixelBuffer(arr)


def save_image(buffer: PixelBuffer, path: PathLike) -> str:
    """Encode a PixelBuffer; the format follows the file extension (PNG for outputs)."""
    path = os.fspath(path)
    if buffer.channels == 4:
        out = cv2.cvtColor(buffer.pixels, cv2.COLOR_RGBA2BGRA)
    else:
        out = cv2.cvtColor(buffer.pixels, cv2.COLOR_RGB2BGR)
    try:
        ok = cv2.imwrite(path, out)
    except cv2.error as exc:
        raise ImageEncodeError(f"Failed to save image: {path}: {exc}") from exc
    if not ok:
        raise ImageEncodeError(f"Failed to save image: {path}")
    return path
