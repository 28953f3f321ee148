"""
Exceptions raised while assembling a spritesheet.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple


class AssemblerError(Exception):
    """Base class for all assembler failures."""


class NoImagesError(AssemblerError):
    """No usable tiles were found."""

    def __init__(self, search_root: Optional[Path] = None):
        self.search_root = search_root
        if search_root is None:
            message = "No images found to assemble"
        else:
            message = f"No images found under {search_root}"
        super().__init__(message)


class InconsistentSizeError(AssemblerError):
    """Tiles do not all share the same width and height."""

    def __init__(self, name: str, expected: Tuple[int, int], actual: Tuple[int, int]):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Inconsistent tile sizes: {name} is {actual[0]}x{actual[1]}, "
            f"expected {expected[0]}x{expected[1]}"
        )


class ImageFormatError(AssemblerError):
    """A decoded image is not an 8-bit RGBA raster."""

    def __init__(self, path: Path, mode: str):
        self.path = path
        self.mode = mode
        super().__init__(f"Not an RGBA image: {path} (mode {mode})")


class OutputWriteError(AssemblerError):
    """The finished spritesheet could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write spritesheet {path}: {reason}")
