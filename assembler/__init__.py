"""
Spritesheet Assembler - pack equally-sized RGBA tiles into one image

This package loads the tiles found under a root directory, picks a
near-square grid for them and writes the composite spritesheet.
"""

from .config import AssemblerConfig
from .core import assemble
from .errors import (
    AssemblerError,
    ImageFormatError,
    InconsistentSizeError,
    NoImagesError,
    OutputWriteError,
)
from .layout import Dimensions, GridLayout, optimal_stacking, plan_layout, tile_dimensions

__version__ = "1.0.0"

__all__ = [
    "AssemblerConfig",
    "AssemblerError",
    "Dimensions",
    "GridLayout",
    "ImageFormatError",
    "InconsistentSizeError",
    "NoImagesError",
    "OutputWriteError",
    "assemble",
    "optimal_stacking",
    "plan_layout",
    "tile_dimensions",
]
