"""
Logging utilities for the spritesheet assembler.

Console output goes to stderr so stdout stays free on success.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Setup logging to the console and, optionally, a debug log file.

    Args:
        verbose: Show INFO messages on the console instead of warnings only
        log_file: Path of a DEBUG-level log file, or None for no file
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        logging.info(f"Logging initialized. Debug log: {log_file}")


def log_layout(layout, calculation_time: float) -> None:
    """
    Log the grid chosen for a spritesheet.

    Args:
        layout: GridLayout that was planned
        calculation_time: Time taken to plan it, in seconds
    """
    logger = logging.getLogger(__name__)

    logger.info(f"Layout for {layout.count} tiles:")
    logger.info(f"  Tile: {layout.tile.x}x{layout.tile.y} pixels")
    logger.info(f"  Grid: {layout.columns} columns x {layout.rows} rows")
    logger.info(f"  Canvas: {layout.canvas_width}x{layout.canvas_height} pixels")
    logger.info(f"  Cells used: {layout.count}/{layout.total_cells}")
    logger.info(f"  Efficiency: {layout.efficiency:.1%}")
    logger.debug(f"  Calculation time: {calculation_time:.3f} seconds")
