"""High-level orchestration: single-image engine and folder batch runner."""

from .engine import (
    ColourRemovalEngine,
    RemovalMode,
    RemovalResult,
    process,
)
from .batch import (
    find_image_files,
    output_paths,
    print_progress_bar,
    process_directory,
    process_file,
)

__all__ = [
    "ColourRemovalEngine",
    "RemovalMode",
    "RemovalResult",
    "process",
    "find_image_files",
    "output_paths",
    "print_progress_bar",
    "process_directory",
    "process_file",
]
