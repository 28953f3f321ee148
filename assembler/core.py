"""
Spritesheet assembly pipeline.

Loads tiles, checks their sizes, plans the grid, composes the canvas and
writes it, strictly in that order.
"""

import logging
import time

from .config import AssemblerConfig
from .layout import GridLayout, plan_layout, tile_dimensions
from .loader import collect_tiles
from .render import compose_spritesheet, save_spritesheet


def assemble(config: AssemblerConfig) -> GridLayout:
    """
    Build the spritesheet described by `config`.

    Args:
        config: Root directory and output filename

    Returns:
        GridLayout of the written spritesheet

    Raises:
        NoImagesError: no usable tiles under the tile directory
        InconsistentSizeError: tiles differ in size
        OutputWriteError: the spritesheet could not be written
    """
    logger = logging.getLogger(__name__)
    start_time = time.time()

    logger.info(f"Collecting tiles from: {config.tiles_dir}")
    tiles = collect_tiles(config.tiles_dir)
    tile = tile_dimensions(tiles, search_root=config.tiles_dir)
    layout = plan_layout(len(tiles), tile)

    canvas = compose_spritesheet(tiles, layout)
    save_spritesheet(canvas, config.output_path)

    logger.info(f"Assembled {layout.count} tiles in {time.time() - start_time:.2f} seconds")
    return layout
