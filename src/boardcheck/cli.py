"""Command-line entry point: validate placement files and print the report."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from boardcheck.ingest import (
    iter_stream_lines,
    partition_lines,
    read_partitions,
    read_placement_lines,
)
from boardcheck.validation import (
    PlacementValidator,
    ValidatorSettings,
    render_text,
    report_to_dict,
)

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_CLEAN = 1
EXIT_IO_ERROR = 2


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boardcheck",
        description="Validate chess piece placements against the starting layout.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        type=Path,
        help="placement files or directories (default: read stdin)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=("text", "json"),
        default="text",
        help="report format (default: text)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="write the report here instead of stdout"
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="accept lowercase square names such as 'e4'",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--per-file",
        action="store_true",
        help="tally each input file as its own partition before merging",
    )
    group.add_argument(
        "--partitions",
        type=_positive_int,
        metavar="N",
        help="tally the input in N round-robin partitions before merging",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="exit with status 1 unless both sides match the starting layout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    validator = PlacementValidator(
        ValidatorSettings(case_insensitive_squares=args.ignore_case)
    )
    try:
        if not args.inputs:
            lines = list(iter_stream_lines(sys.stdin))
            partitions = [lines]
        elif args.per_file:
            partitions = read_partitions(args.inputs)
        else:
            partitions = [read_placement_lines(args.inputs)]
    except OSError as exc:
        _LOGGER.error("Cannot read input: %s", exc)
        return EXIT_IO_ERROR

    if args.partitions is not None:
        partitions = partition_lines(
            (line for part in partitions for line in part), args.partitions
        )
    report = validator.validate_partitions(partitions)

    if args.format == "json":
        rendered = json.dumps(report_to_dict(report), indent=2) + "\n"
    else:
        rendered = render_text(report)

    if args.output is not None:
        try:
            args.output.write_text(rendered, encoding="utf-8")
        except OSError as exc:
            _LOGGER.error("Cannot write report: %s", exc)
            return EXIT_IO_ERROR
        _LOGGER.info("Report written to %s", args.output)
    else:
        sys.stdout.write(rendered)

    if args.check and not report.is_clean:
        return EXIT_NOT_CLEAN
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
