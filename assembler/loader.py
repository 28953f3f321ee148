"""
Tile discovery and decoding.

Tiles are read from a directory tree in name order. Anything that cannot be
opened, or that is not an 8-bit RGBA raster, is skipped without failing
the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

from PIL import Image

from .errors import ImageFormatError

logger = logging.getLogger(__name__)

# Pillow plugins report some corrupt data as SyntaxError
DECODE_ERRORS = (OSError, ValueError, SyntaxError, Image.DecompressionBombError, ImageFormatError)


@dataclass(frozen=True)
class Tile:
    """A decoded RGBA tile and the file it came from."""
    path: Path
    image: Image.Image

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


def walk_sorted(directory: Path) -> Iterator[Path]:
    """Yield every entry below `directory` except real subdirectories, in name order."""
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.debug(f"Skipping unreadable directory {directory}: {e}")
        return

    for entry in entries:
        # Linked directories are yielded as entries, never walked
        if entry.is_dir() and not entry.is_symlink():
            yield from walk_sorted(entry)
        else:
            yield entry


def load_tile(path: Path) -> Tile:
    """
    Decode one file as an RGBA tile.

    Raises:
        ImageFormatError: if the image is not 8-bit RGBA
        OSError: if the file cannot be opened or decoded
    """
    with Image.open(path) as img:
        if img.mode != "RGBA":
            raise ImageFormatError(path, img.mode)
        img.load()
        # copy() detaches the pixels from the file handle
        return Tile(path, img.copy())


def collect_tiles(tiles_dir: Path) -> List[Tile]:
    """
    Load every usable tile below `tiles_dir`.

    Args:
        tiles_dir: Directory searched recursively for tiles

    Returns:
        Tiles in sorted-by-name traversal order (possibly empty)
    """
    tiles_dir = Path(tiles_dir)
    if not tiles_dir.is_dir():
        logger.warning(f"Tile directory does not exist: {tiles_dir}")
        return []

    tiles = []
    skipped = 0
    for path in walk_sorted(tiles_dir):
        try:
            tiles.append(load_tile(path))
        except DECODE_ERRORS as e:
            skipped += 1
            logger.debug(f"Skipping {path}: {e}")

    logger.info(f"Loaded {len(tiles)} tiles from {tiles_dir} ({skipped} skipped)")
    return tiles
