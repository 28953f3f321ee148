from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from PIL import Image

from .errors import OutputWriteError
from .layout import GridLayout

TRANSPARENT = (0, 0, 0, 0)


def compose_spritesheet(tiles: Sequence, layout: GridLayout) -> Image.Image:
    """
    Paste tiles into a transparent canvas, one per grid cell in order.

    Tile pixels replace the canvas pixels as-is; no alpha blending happens.
    """
    logging.info(f"Composing {layout.count} tiles into {layout.canvas_width}x{layout.canvas_height} canvas")
    canvas = Image.new("RGBA", layout.canvas_size, TRANSPARENT)

    for i, tile in enumerate(tiles[:layout.count]):
        x, y = layout.cell_origin(i)
        logging.debug(f"Tile {i} ({tile.name}) -> ({x}, {y})")
        canvas.paste(tile.image, (x, y))

    return canvas


def save_spritesheet(canvas: Image.Image, output_path: Path) -> None:
    """
    Encode `canvas` to `output_path`, format chosen from the extension.

    The image is encoded to a temporary file beside `output_path` and moved
    into place only once encoding succeeded, so an existing file at
    `output_path` is either fully replaced or left untouched.

    Raises:
        OutputWriteError: if the image cannot be written
    """
    output_path = Path(output_path)
    image_format = Image.registered_extensions().get(output_path.suffix.lower())
    if image_format is None:
        raise OutputWriteError(output_path, f"unknown file extension {output_path.suffix!r}")

    tmp_path = output_path.with_name(f".{output_path.name}.tmp")
    try:
        canvas.save(tmp_path, format=image_format)
        os.replace(tmp_path, output_path)
    except (OSError, ValueError, KeyError) as e:
        raise OutputWriteError(output_path, str(e)) from e
    finally:
        if tmp_path.exists():
            os.remove(tmp_path)

    logging.info(f"Wrote spritesheet: {output_path} ({canvas.width}x{canvas.height})")
