"""Command line entry point: joint TOML in, DXF drawing out."""

from __future__ import annotations
import argparse
import logging
import sys

from splicer.errors import SpliceError
from splicer.services.drawing_service import DrawingService


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splice-drawing",
        description="Draw an H-section beam splice (elevation + cross-section) as DXF",
    )
    parser.add_argument("input_file", help="Joint description (TOML)")
    parser.add_argument("output_file", help="DXF file to write")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = DrawingService().render_file(args.input_file, args.output_file)
    except SpliceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for view in summary.views:
        logger.info(
            f"{view.name}: {view.stats.lines} lines, {view.stats.circles} circles, "
            f"{view.stats.crosses} crosses, {view.stats.dimensions} dimensions"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
