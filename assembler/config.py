"""
Run configuration for the spritesheet assembler.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT = "out.png"
DEFAULT_TILES_SUBDIR = "temp"


@dataclass(frozen=True)
class AssemblerConfig:
    """Where to read tiles from and where to write the spritesheet."""
    root: Path
    output: str = DEFAULT_OUTPUT
    tiles_subdir: str = DEFAULT_TILES_SUBDIR

    @property
    def tiles_dir(self) -> Path:
        return Path(self.root) / self.tiles_subdir

    @property
    def output_path(self) -> Path:
        return Path(self.root) / self.output

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "AssemblerConfig":
        return cls(root=Path(args.root), output=args.output or DEFAULT_OUTPUT)
