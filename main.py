"""
Entry point and compatibility facade for the colour removal tool.

This module exposes a stable API and a CLI suitable for PyInstaller builds.

Packages:
- colour_remover.image: PixelBuffer, colour parsing, image file I/O
- colour_remover.segmentation: background, flood fill, filtering, erasing, cropping
- colour_remover.pipeline: Single-image engine (`process`) and folder batch runner
"""

from __future__ import annotations

from colour_remover.config import load_settings
from colour_remover.errors import (
    ColourRemovalError,
    InvalidColour,
    InvalidImage,
    InvalidThreshold,
)
from colour_remover.image import PixelBuffer, load_image, parse_colour, save_image
from colour_remover.pipeline import (
    ColourRemovalEngine,
    RemovalMode,
    process,
    process_directory,
)

__all__ = [
    # errors
    "ColourRemovalError",
    "InvalidColour",
    "InvalidImage",
    "InvalidThreshold",
    # image
    "PixelBuffer",
    "load_image",
    "parse_colour",
    "save_image",
    # pipeline
    "ColourRemovalEngine",
    "RemovalMode",
    "process",
    "process_directory",
]


def _cli(argv: list[str] | None = None) -> int:
    """CLI for removing a colour from every image in a folder.

    Positional:
    SOURCE_FOLDER: Folder with BMP/JPEG/GIF/PNG images
    COLOUR: Colour to remove, as R,G,B
    THRESHOLD: Minimum number of connected pixels before a region is removed

    Options:
    --mode: erase|extract|crop (default from config: extract)
    --out / -o: Output directory (default from config: out)
    --suffix: Suffix of the removed-pixels image (default: _s)
    --keep-alpha / --no-keep-alpha: Process images as RGBA, or force RGB over config
    --quiet / -q: Only print warnings
    --progress: Show a progress bar
    --config: Path to settings.json
    """
    import argparse

    parser = argparse.ArgumentParser(description="Remove large connected areas of one colour from images in a folder.")
    parser.add_argument("source_folder", type=str, help="Folder containing images to process")
    parser.add_argument("colour", type=str, help="Colour to remove, in the form R,G,B")
    parser.add_argument("threshold", type=int, help="Minimum number of connected pixels before an area is removed")
    parser.add_argument("--mode", type=str, default=None, choices=[m.value for m in RemovalMode], help="erase: remove only; extract: also write <name>_s.png with the removed pixels; crop: crop result to content")
    parser.add_argument("--out", "-o", type=str, default=None, help="Output directory (default from config: out)")
    parser.add_argument("--suffix", type=str, default=None, help="Filename suffix of the extraction image (default: _s)")
    parser.add_argument("--keep-alpha", action=argparse.BooleanOptionalAction, default=None, help="Keep the alpha channel when reading images (--no-keep-alpha overrides config)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print warnings and errors")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--config", type=str, default=None, help="Path to settings.json")

    args = parser.parse_args(argv)

    settings = load_settings(args.config).override(
        output_dir=args.out,
        extraction_suffix=args.suffix,
        mode=args.mode,
        keep_alpha=args.keep_alpha,
    )

    try:
        colour = parse_colour(args.colour)
        summary = process_directory(
            args.source_folder,
            colour,
            args.threshold,
            mode=settings.mode,
            out_dir=settings.output_dir,
            suffix=settings.extraction_suffix,
            extensions=settings.extensions,
            keep_alpha=settings.keep_alpha,
            quiet=args.quiet,
            progress=args.progress,
        )
    except ValueError as e:
        print(str(e))
        return 2
    except (FileNotFoundError, NotADirectoryError) as e:
        print(str(e))
        return 1

    if not args.quiet:
        print(f"Images processed: {summary['processed']}")
    return 1 if summary["failed"] and not summary["processed"] else 0


if __name__ == "__main__":
    raise SystemExit(_cli())
