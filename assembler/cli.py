from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .config import DEFAULT_OUTPUT, AssemblerConfig
from .core import assemble
from .errors import InconsistentSizeError, NoImagesError, OutputWriteError
from .logger import setup_logging

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_WRITE_ERROR = 5


def cli_assemble(args: argparse.Namespace) -> int:
    """Combine the tiles under ROOT/temp into one spritesheet."""
    config = AssemblerConfig.from_args(args)
    logging.debug(f"Config: {config}")

    try:
        assemble(config)
    except (NoImagesError, InconsistentSizeError) as e:
        logging.error(f"Cannot assemble spritesheet: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except OutputWriteError as e:
        logging.error(f"Error saving spritesheet: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_WRITE_ERROR

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="assembler", description="Combine PNGs into a spritesheet")
    p.add_argument("-r", "--root", required=True, metavar="DIR", help="Where to search for spritesheet tiles (reads DIR/temp)")
    p.add_argument("-o", "--out", dest="output", default=DEFAULT_OUTPUT, metavar="PNG_FILENAME",
                   help=f"Spritesheet output filename, written inside DIR (default: {DEFAULT_OUTPUT})")
    p.add_argument("-v", "--verbose", action="store_true", help="Show progress messages")
    p.add_argument("--log-file", type=Path, help="Also write a debug log to this file")
    p.set_defaults(func=cli_assemble)
    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        result = args.func(args)
        logging.info(f"Operation completed with exit code: {result}")
        return result
    except Exception as e:
        logging.error(f"Unhandled exception: {e}", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
