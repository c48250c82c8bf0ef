"""
Command-line entry point for the abstract factory demo.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.settings import DemoConfig, ShapeFamily
from .demo import run_demo
from .reports.inventory import format_inventory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abstract-shapes",
        description="Draw shapes built through an abstract factory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  abstract-shapes
  abstract-shapes --family robust
  abstract-shapes --family simple --inventory --plot shapes.png
        """
    )

    parser.add_argument(
        "--family",
        default=ShapeFamily.SIMPLE.value,
        choices=[family.value for family in ShapeFamily],
        help="Shape family to build from (default: simple)"
    )

    parser.add_argument(
        "--inventory",
        action="store_true",
        help="Print a table of the produced shapes after drawing them"
    )

    parser.add_argument(
        "--plot",
        metavar="PATH",
        default=None,
        help="Save a rendering of the produced shapes to PATH"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, written to stderr (default: WARNING)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = DemoConfig(family=args.family)
    shapes = run_demo(config)

    if args.inventory:
        print()
        print(format_inventory(shapes))

    if args.plot:
        # Imported lazily so plain runs never load matplotlib
        from .visualization.plotting import save_shapes_plot

        save_shapes_plot(shapes, args.plot, title=f"{config.family.name} family")
        logger.info(f"Saved shape rendering to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
