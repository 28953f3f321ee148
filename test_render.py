#!/usr/bin/env python3
"""
Tests for canvas composition and writing.
"""

import pytest
from PIL import Image

from assembler.errors import OutputWriteError
from assembler.layout import Dimensions, plan_layout
from assembler.loader import load_tile
from assembler.render import compose_spritesheet, save_spritesheet

COLORS = [(255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255), (9, 9, 9, 255), (200, 100, 50, 255)]


def test_single_tile_round_trip(make_tile):
    tile = load_tile(make_tile("a.png", size=(4, 4), color=(10, 20, 30, 255)))

    canvas = compose_spritesheet([tile], plan_layout(1, Dimensions(4, 4)))

    assert canvas.size == (4, 4)
    assert canvas.mode == "RGBA"
    assert canvas.tobytes() == tile.image.tobytes()


def test_tiles_fill_cells_in_order(make_tile):
    tiles = [load_tile(make_tile(f"{i}.png", color=COLORS[i])) for i in range(5)]
    layout = plan_layout(len(tiles), Dimensions(10, 10))

    canvas = compose_spritesheet(tiles, layout)

    assert canvas.size == (20, 30)
    for i, (x, y) in enumerate(layout.placements):
        assert canvas.getpixel((x + 5, y + 5)) == COLORS[i]
    # Sixth cell is unused
    assert canvas.getpixel((15, 25)) == (0, 0, 0, 0)


def test_no_alpha_blending(make_tile):
    tile = load_tile(make_tile("a.png", size=(2, 2), color=(255, 0, 0, 128)))

    canvas = compose_spritesheet([tile], plan_layout(1, Dimensions(2, 2)))

    assert canvas.getpixel((1, 1)) == (255, 0, 0, 128)
    assert canvas.getpixel((0, 0)) == (0, 0, 0, 0)


def test_save_writes_png(tmp_path):
    canvas = Image.new("RGBA", (6, 4), (1, 2, 3, 4))
    out = tmp_path / "sheet.png"

    save_spritesheet(canvas, out)

    with Image.open(out) as img:
        assert img.size == (6, 4)
        assert img.mode == "RGBA"


def test_save_unknown_extension(tmp_path):
    canvas = Image.new("RGBA", (2, 2))
    out = tmp_path / "sheet.notaformat"

    with pytest.raises(OutputWriteError) as excinfo:
        save_spritesheet(canvas, out)

    assert excinfo.value.path == out
    assert not out.exists()


def test_save_into_missing_directory(tmp_path):
    canvas = Image.new("RGBA", (2, 2))
    with pytest.raises(OutputWriteError):
        save_spritesheet(canvas, tmp_path / "missing" / "out.png")


def test_failed_write_keeps_existing_output(tmp_path):
    out = tmp_path / "sheet.jpg"
    out.write_bytes(b"previous spritesheet")
    # JPEG cannot store an alpha channel
    canvas = Image.new("RGBA", (2, 2), (1, 2, 3, 4))

    with pytest.raises(OutputWriteError):
        save_spritesheet(canvas, out)

    assert out.read_bytes() == b"previous spritesheet"
    assert [p.name for p in tmp_path.iterdir()] == ["sheet.jpg"]


def test_save_replaces_existing_output(tmp_path):
    out = tmp_path / "sheet.png"
    out.write_bytes(b"previous spritesheet")

    save_spritesheet(Image.new("RGBA", (3, 5)), out)

    with Image.open(out) as img:
        assert img.size == (3, 5)
    assert [p.name for p in tmp_path.iterdir()] == ["sheet.png"]
