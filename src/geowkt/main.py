"""Main entry point for geowkt."""

import argparse
import logging
import sys
from typing import Any

import yaml

from .config import GeometryLoader, ProfileLoader
from .exceptions import GeowktError
from .extractors import GeometryExtractor
from .generators import CaseTransform, Dialect, WktGenerator

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Geowkt - Well-Known Text generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        metavar="PATH",
        help="YAML geometry document to convert",
    )
    parser.add_argument(
        "-p", "--profile",
        help="Named option profile to start from (e.g. default, strict, sfs12, postgis)",
    )
    parser.add_argument(
        "-d", "--dialect",
        choices=[d.value for d in Dialect],
        help="Output dialect (default: wkt11)",
    )
    parser.add_argument(
        "-c", "--case",
        choices=[c.value for c in CaseTransform],
        help="Case transform applied to the output (default: none)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        metavar="N",
        help="Fractional digits per ordinate (default: 6)",
    )
    parser.add_argument(
        "--srid",
        action="store_true",
        default=None,
        help="Prefix the output with SRID=<id>; (ewkt dialect only)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> dict[str, Any]:
    """Combine a profile with explicit command line overrides."""
    options: dict[str, Any] = {}
    if args.profile:
        options.update(ProfileLoader().load_mapping(args.profile))

    overrides = {
        "dialect": args.dialect,
        "case_transform": args.case,
        "float_precision": args.precision,
        "emit_identifier": args.srid,
    }
    options.update({k: v for k, v in overrides.items() if v is not None})
    return options


def main(argv: list[str] | None = None) -> int:
    """Run the geowkt command line tool."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        generator = WktGenerator(GeometryExtractor(), build_options(args))
        geometry = GeometryLoader().load(args.path)
        logger.debug(f"Loaded {geometry.geometry_type.value} from {args.path}")
        print(generator.generate(geometry))
    except (GeowktError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
