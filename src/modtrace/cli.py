"""modtrace CLI: trace dependency paths between two packages."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from typing import List, Optional, TextIO

from modtrace.api import trace
from modtrace.codes import OutputFormat
from modtrace.config import TraceConfig
from modtrace.kernel.errors import MalformedEdgeError
from modtrace._internal.logging import setup_logging

USAGE = "go mod graph | %(prog)s [OPTION]... PARENT_PACKAGE DEPENDENT_PACKAGE"
INPUT_HINT = (
    "Provide input by `go mod graph | modtrace ROOT_PACKAGE DEPENDENT_PACKAGE` "
    "or `modtrace ROOT_PACKAGE DEPENDENT_PACKAGE < gomodgraph.txt`"
)


def _build_parser() -> argparse.ArgumentParser:
    try:
        modtrace_version = get_version("modtrace")
    except PackageNotFoundError:
        modtrace_version = "dev"

    parser = argparse.ArgumentParser(
        prog="modtrace",
        usage=USAGE,
        description="Show every dependency path from PARENT_PACKAGE to DEPENDENT_PACKAGE "
                    "as a minimized graph."
    )
    parser.add_argument("--version", action="version", version=f"modtrace {modtrace_version}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="use verbose mode (trace the path search on stderr)"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format: text (edge lines, default) or json (paths, libraries and edges)"
    )
    parser.add_argument(
        "--min-ratio",
        type=float,
        default=None,
        help="Match ratio a known name must exceed to be suggested for an unknown one"
    )
    parser.add_argument("parent", nargs="?", metavar="PARENT_PACKAGE")
    parser.add_argument("target", nargs="?", metavar="DEPENDENT_PACKAGE")
    return parser


def _help(parser: argparse.ArgumentParser) -> None:
    parser.print_help(sys.stdout)
    sys.exit(1)


def _has_std_input(stream: TextIO) -> bool:
    """True when stdin is a pipe or file rather than an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    return not (isatty is not None and isatty())


def _read_input(stream: TextIO) -> List[str]:
    return [line.rstrip("\r\n") for line in stream]


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point for modtrace."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.parent or not args.target:
        print("Required arguments PARENT_PACKAGE or DEPENDENT_PACKAGE were not provided")
        _help(parser)

    try:
        config = TraceConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if args.verbose is not None:
        config.verbose = args.verbose
    if args.output_format is not None:
        config.output_format = OutputFormat(args.output_format)
    if args.min_ratio is not None:
        config.min_ratio = args.min_ratio

    logger = setup_logging(config.verbose)

    if not _has_std_input(sys.stdin):
        print(INPUT_HINT)
        _help(parser)

    lines = _read_input(sys.stdin)
    if not lines:
        print("No input provided")
        _help(parser)

    try:
        result = trace(
            lines,
            args.parent,
            args.target,
            min_ratio=config.min_ratio,
            sink=logger.debug if config.verbose else None,
        )
    except MalformedEdgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if config.output_format == OutputFormat.JSON:
        print(result.model_dump_json(indent=2))
    else:
        sys.stdout.write(result.render())


if __name__ == "__main__":
    main()
