"""Command-line entry point: ``geodome [options]``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from geodome.construction import build_dome, load_config
from geodome.edges import decorate_edges, group_edges_by_length
from geodome.formatting import format_full, format_summary
from geodome.model import DomeConfig, PolyhedronId, SpherifyMode

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2

_SIZE_OPTIONS = {
    "radius": SpherifyMode.RADIUS,
    "min_length": SpherifyMode.MIN_LENGTH,
    "max_length": SpherifyMode.MAX_LENGTH,
}


class ArgumentError(Exception):
    """Invalid combination or value of command-line arguments."""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geodome",
        description=(
            "Subdivide a polyhedron into a geodesic sphere and report "
            "its edge lengths."
        ),
    )
    parser.add_argument(
        "-f", "--frequency",
        help="frequency of triangular subdivisions (default: 1)",
    )
    size = parser.add_argument_group(
        "size", "exactly one of these sets the size of the result",
    )
    size.add_argument(
        "-r", "--radius",
        help="centre-to-vertex radius of the final sphere",
    )
    size.add_argument(
        "-m", "--min-length", dest="min_length",
        help="shortest vertex-to-vertex length of the final polyhedron",
    )
    size.add_argument(
        "-M", "--max-length", dest="max_length",
        help="longest vertex-to-vertex length of the final polyhedron",
    )
    parser.add_argument(
        "--polyhedron",
        choices=[p.value for p in PolyhedronId],
        help="base polyhedron (default: icosahedron)",
    )
    parser.add_argument(
        "-d", "--do-not-spherify", action="store_true",
        help="project only the base polyhedron and subdivide its faces flat",
    )
    parser.add_argument(
        "-F", "--full-output", action="store_true",
        help="list every edge (default: per-length summary only)",
    )
    parser.add_argument(
        "-p", "--precision", type=int,
        help="rounding place for edge lengths, -2 = hundredths (default: -2)",
    )
    parser.add_argument(
        "-c", "--config",
        help="JSON dome config; command-line options override its values",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress to stderr (-vv for debug detail)",
    )
    return parser


def _positive_number(text: str, name: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ArgumentError(f"{name} must be a positive number.") from None
    if not value > 0:
        raise ArgumentError(f"{name} must be a positive number.")
    return value


def _positive_int(text: str, name: str) -> int:
    try:
        value = float(text)
    except ValueError:
        raise ArgumentError(f"{name} must be a positive integer.") from None
    if not value.is_integer() or value <= 0:
        raise ArgumentError(f"{name} must be a positive integer.")
    return int(value)


def config_from_args(args: argparse.Namespace) -> DomeConfig:
    """Merge parsed arguments over an optional JSON config.

    Raises:
        ArgumentError: If the arguments are inconsistent or invalid.
    """
    config = load_config(args.config) if args.config else None

    given = [name for name in _SIZE_OPTIONS if getattr(args, name) is not None]
    if len(given) > 1:
        raise ArgumentError(
            "A maximum of one of radius, min-length or max-length is allowed."
        )
    if not given and config is None:
        raise ArgumentError(
            "One of radius, min-length or max-length is required."
        )

    overrides: dict = {}
    if given:
        name = given[0]
        overrides["size_mode"] = _SIZE_OPTIONS[name]
        overrides["size_value"] = _positive_number(
            getattr(args, name), name.replace("_", "-").capitalize(),
        )
    if args.frequency is not None:
        overrides["frequency"] = _positive_int(args.frequency, "Frequency")
    if args.polyhedron is not None:
        overrides["polyhedron"] = args.polyhedron
    if args.do_not_spherify:
        overrides["spherify"] = False
    if args.full_output:
        overrides["full_output"] = True
    if args.precision is not None:
        overrides["precision"] = args.precision

    if config is None:
        return DomeConfig(**overrides)
    return replace(config, **overrides)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def report(config: DomeConfig) -> str:
    """Build the dome described by *config* and return the edge report."""
    dome = build_dome(config)
    decorated = decorate_edges(dome, config.precision)
    groups = group_edges_by_length(decorated)
    formatter = format_full if config.full_output else format_summary
    return formatter(groups, len(decorated))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = config_from_args(args)
    except (ArgumentError, ValueError, OSError) as exc:
        logger.debug("Argument validation failed", exc_info=True)
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    print(report(config))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
