"""
Shared helpers for the assembler tests.
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw


def create_tile(path: Path, size=(10, 10), color=(255, 0, 0, 255), mode="RGBA"):
    """Write a tile with a solid fill and a one pixel marker in the corner."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if mode == "RGBA":
        img = Image.new("RGBA", size, color)
        draw = ImageDraw.Draw(img)
        draw.point((0, 0), fill=(0, 0, 0, 0))
    else:
        img = Image.new(mode, size, color[:3] if mode == "RGB" else color[0])
    img.save(path)
    return path


@pytest.fixture
def root_dir(tmp_path):
    """Root directory with an empty temp/ tile folder."""
    (tmp_path / "temp").mkdir()
    return tmp_path


@pytest.fixture
def make_tile(root_dir):
    def _make(name, size=(10, 10), color=(255, 0, 0, 255), mode="RGBA"):
        return create_tile(root_dir / "temp" / name, size, color, mode)
    return _make
