"""
Grid layout for uniformly-sized tiles.

The grid is chosen by trying every column count and keeping the one whose
canvas has the smallest largest side. That score favours square-ish sheets
over merely area-minimal ones, and existing sheets depend on the exact
placement it produces.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .errors import InconsistentSizeError, NoImagesError
from .logger import log_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dimensions:
    """A pair of positive integers: pixels of one tile or tiles per axis."""
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class GridLayout:
    """Result of planning a spritesheet."""
    tile: Dimensions  # pixel size of one tile
    grid: Dimensions  # columns x rows
    count: int
    placements: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def columns(self) -> int:
        return self.grid.x

    @property
    def rows(self) -> int:
        return self.grid.y

    @property
    def canvas_width(self) -> int:
        return self.grid.x * self.tile.x

    @property
    def canvas_height(self) -> int:
        return self.grid.y * self.tile.y

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

    @property
    def total_cells(self) -> int:
        return self.grid.x * self.grid.y

    @property
    def efficiency(self) -> float:
        return self.count / self.total_cells

    def cell_origin(self, index: int) -> Tuple[int, int]:
        """Pixel offset of the top-left corner of cell `index`."""
        if not 0 <= index < self.count:
            raise IndexError(f"Cell {index} outside of {self.count} placed tiles")
        return self.placements[index]


def tile_dimensions(tiles: Sequence, search_root: Optional[Path] = None) -> Dimensions:
    """
    Return the size shared by every tile.

    Args:
        tiles: Ordered tiles, each exposing `name` and `size` (width, height)
        search_root: Where the tiles were looked for, named in NoImagesError

    Returns:
        Dimensions of the first tile

    Raises:
        NoImagesError: if there are no tiles
        InconsistentSizeError: if any tile differs from the first one
    """
    if not tiles:
        raise NoImagesError(search_root)

    reference = tuple(tiles[0].size)
    for tile in tiles[1:]:
        if tuple(tile.size) != reference:
            raise InconsistentSizeError(tile.name, reference, tuple(tile.size))

    logger.debug(f"All {len(tiles)} tiles are {reference[0]}x{reference[1]} pixels")
    return Dimensions(reference[0], reference[1])


def rows_for_columns(count: int, columns: int) -> int:
    """Smallest row count that fits `count` tiles in `columns` columns."""
    return math.ceil(count / columns)


def optimal_stacking(count: int, tile: Dimensions) -> Dimensions:
    """
    Choose columns and rows for `count` tiles of size `tile`.

    Every column count from 1 to `count` is scored by the longer side of the
    resulting canvas. The first column count reaching the lowest score wins.
    """
    if count < 1:
        raise ValueError(f"Cannot lay out {count} tiles")

    best_columns = 0
    best_score = None
    for columns in range(1, count + 1):
        rows = rows_for_columns(count, columns)
        score = max(rows * tile.y, columns * tile.x)
        if best_score is None or score < best_score:
            best_score = score
            best_columns = columns

    return Dimensions(best_columns, rows_for_columns(count, best_columns))


def plan_layout(count: int, tile: Dimensions) -> GridLayout:
    """Plan the full grid for `count` tiles, including cell placements."""
    start_time = time.time()
    grid = optimal_stacking(count, tile)

    placements = []
    for i in range(count):
        col = i % grid.x
        row = i // grid.x
        placements.append((col * tile.x, row * tile.y))

    layout = GridLayout(tile=tile, grid=grid, count=count, placements=placements)

    log_layout(layout, time.time() - start_time)
    return layout
