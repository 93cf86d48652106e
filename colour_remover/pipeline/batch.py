"""Batch pipeline: find images in a folder → remove colour → write PNGs.

Each image is handled on its own; a file that cannot be read, processed or
written is reported and skipped so the rest of the folder still gets done.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from colour_remover.config import DEFAULT_EXTENSIONS
from colour_remover.errors import ImageIOError
from colour_remover.image import format_colour, load_image, save_image

from .engine import ColourRemovalEngine, RemovalMode


def print_progress_bar(done: int, total: int, failed: int = 0, width: int = 10) -> None:
    """Render a colored one-line progress bar (10 fixed segments).

    Doxygen:
    - @param done: Number of images handled so far (including failures).
    - @param total: Total images in the batch.
    - @param failed: Number of images that failed.
    - @param width: Number of bar segments (default 10).
    """
    total = max(1, total)
    done = max(0, min(done, total))
    segments = max(1, int(width))
    filled = segments if done >= total else int(done / total * segments)
    pending = max(0, segments - filled)
    GREEN = "\x1b[32m"
    RED = "\x1b[31m"
    RESET = "\x1b[0m"
    bar = f"{GREEN}{'█'*filled}{RESET}{RED}{'█'*pending}{RESET} [{done}/{total}]"
    if failed:
        bar += f" failed: {failed}"
    print(f"\r{bar}", end="", flush=True)


def find_image_files(folder: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> List[str]:
    """List image files directly inside ``folder`` whose extension is allowed (case-insensitive)."""
    if not os.path.isdir(folder):
        raise NotADirectoryError(f"Not a directory: {folder}")
    allowed = {e.lower().lstrip(".") for e in extensions}
    found: List[str] = []
    for name in sorted(os.listdir(folder)):
        path = os.path.join(folder, name)
        ext = os.path.splitext(name)[1].lower().lstrip(".")
        # splitext(".png") has no extension, so dotfiles never match
        if ext in allowed and os.path.isfile(path):
            found.append(path)
    return found


def output_paths(image_path: str, out_dir: str, suffix: str = "_s") -> Tuple[str, str]:
    """Return ``(<out_dir>/<name>.png, <out_dir>/<name><suffix>.png)``."""
    base_filename = os.path.basename(image_path)
    base_name_no_ext = os.path.splitext(base_filename)[0] or base_filename
    return (
        os.path.join(out_dir, f"{base_name_no_ext}.png"),
        os.path.join(out_dir, f"{base_name_no_ext}{suffix}.png"),
    )


def process_file(
    image_path: str,
    engine: ColourRemovalEngine,
    out_dir: str,
    suffix: str = "_s",
    keep_alpha: bool = False,
    quiet: bool = False,
) -> Dict[str, Any]:
    """Load one image, run the engine on it and save the outputs.

    Returns a dict with ``output_path``, ``extraction_path`` (None unless in
    extract mode), ``removed_pixels`` and ``removed_regions``.
    """
    if not quiet:
        print(f"Reading image: {image_path}")
    image = load_image(image_path, keep_alpha=keep_alpha)

    if not quiet:
        print("Processing...")
    result = engine.run(image)
    if not quiet:
        for size in result.removed_regions:
            print(f"Removing {size} pixels")
        if engine.mode is RemovalMode.ERASE_AND_CROP and result.bounding_box is None:
            print(f"Warning: nothing but background left in {image_path}; saving uncropped")

    out_path, extraction_path = output_paths(image_path, out_dir, suffix)
    save_image(result.image, out_path)
    if result.extraction is not None:
        save_image(result.extraction, extraction_path)
    else:
        extraction_path = None

    return {
        "output_path": out_path,
        "extraction_path": extraction_path,
        "removed_pixels": result.removed_pixels,
        "removed_regions": len(result.removed_regions),
    }


def process_directory(
    folder: str,
    colour: Sequence[int],
    threshold: int,
    mode: Union[str, RemovalMode] = RemovalMode.ERASE_AND_EXTRACT,
    out_dir: str = "out",
    suffix: str = "_s",
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    keep_alpha: bool = False,
    quiet: bool = False,
    progress: bool = False,
) -> Dict[str, Any]:
    """Remove ``colour`` from every image in ``folder``.

    Doxygen:
    - @param folder: Directory to scan (not recursive).
    - @param colour: Target colour as an (r, g, b) tuple.
    - @param threshold: Minimum region size to remove (>= 1).
    - @param mode: 'erase', 'extract' or 'crop' (or a RemovalMode).
    - @param out_dir: Output directory, created when missing.
    - @param suffix: Name suffix of the extraction image.
    - @param extensions: Allowed file extensions.
    - @param keep_alpha: Process images as RGBA.
    - @param quiet: Suppress per-image messages.
    - @param progress: Show a progress bar.
    - @return: Dict with keys {'processed', 'failed', 'outputs'}.
    - @throws FileNotFoundError: If the folder holds no matching images.
    - @throws ColourRemovalError: If colour or threshold is invalid (before any file is read).
    """
    # Validate colour/threshold once, before touching any file
    engine = ColourRemovalEngine(colour, threshold, mode)

    if not quiet:
        print("Finding files")
    files = find_image_files(folder, extensions)
    if not files:
        raise FileNotFoundError(f"No image files found in directory: {os.path.abspath(folder)}")

    os.makedirs(out_dir, exist_ok=True)
    if not quiet:
        print(f"Removing colour {format_colour(engine.target)} from {len(files)} image(s), threshold {engine.threshold}")

    outputs: List[Dict[str, Any]] = []
    failed: Dict[str, str] = {}
    for i, path in enumerate(files, start=1):
        try:
            outputs.append(process_file(path, engine, out_dir, suffix=suffix, keep_alpha=keep_alpha, quiet=quiet))
        except (OSError, ImageIOError, ValueError) as e:
            failed[path] = str(e)
            print(f"Warning: skipping {path}: {e}")
        if progress:
            print_progress_bar(i, len(files), failed=len(failed))
    if progress:
        print()

    if not quiet:
        print("Success!" if not failed else f"Finished with {len(failed)} failure(s)")

    return {
        "processed": len(outputs),
        "failed": failed,
        "outputs": outputs,
    }
