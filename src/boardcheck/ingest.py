"""Reading raw placement lines from disk.

Lines are forwarded exactly as read (minus the line terminator); no
parsing or validation happens here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

_LOGGER = logging.getLogger(__name__)

# Bookkeeping files such as "_SUCCESS" or ".crc" files are not input.
_HIDDEN_PREFIXES = ("_", ".")


def input_files(paths: Iterable[Path]) -> list[Path]:
    """Expand *paths* into the regular files to read, directories in name order."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                child
                for child in sorted(path.iterdir())
                if child.is_file() and not child.name.startswith(_HIDDEN_PREFIXES)
            )
        elif path.is_file():
            files.append(path)
        else:
            raise FileNotFoundError(f"Input path does not exist: {str(path)!r}")
    return files


def iter_stream_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.rstrip("\r\n")


def iter_file_lines(path: Path) -> Iterator[str]:
    _LOGGER.info("Reading placements from %s", path)
    with path.open(encoding="utf-8", errors="replace") as fh:
        yield from iter_stream_lines(fh)


def read_placement_lines(paths: Iterable[Path]) -> list[str]:
    """All lines of every input file, concatenated."""
    lines: list[str] = []
    for path in input_files(paths):
        lines.extend(iter_file_lines(path))
    return lines


def read_partitions(paths: Iterable[Path]) -> list[list[str]]:
    """One partition per input file."""
    return [list(iter_file_lines(path)) for path in input_files(paths)]


def partition_lines(lines: Iterable[str], n: int) -> list[list[str]]:
    """Distribute *lines* round-robin over *n* partitions."""
    if n < 1:
        raise ValueError(f"Partition count must be positive: {n!r}")
    partitions: list[list[str]] = [[] for _ in range(n)]
    for i, line in enumerate(lines):
        partitions[i % n].append(line)
    return partitions
