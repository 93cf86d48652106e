"""Region segmentation: background detection, flood fill, filtering, erasing, cropping.

These functions operate on PixelBuffers and never print or touch the disk.
"""

from .background import detect_background
from .cropper import crop_to_content, find_content_bounds
from .eraser import erase_region
from .regions import (
    ComponentScanner,
    Region,
    RegionDecision,
    classify_region,
    find_connected_region,
    new_visited,
    should_remove,
    validate_threshold,
)

__all__ = [
    "detect_background",
    "crop_to_content",
    "find_content_bounds",
    "erase_region",
    "ComponentScanner",
    "Region",
    "RegionDecision",
    "classify_region",
    "find_connected_region",
    "new_visited",
    "should_remove",
    "validate_threshold",
]
