"""One-pass line sources for the CLI: files, glob patterns, or stdin. No tailing.

Every source yields (lineno, line, source) with lineno counted from 1 per source,
so diagnostics point at the right place in the right file.
"""

import glob
import os
import sys
from typing import Iterator, TextIO

STDIN_MARKER = "-"
STDIN_NAME = "<stdin>"

NumberedLine = tuple[int, str, str]


def read_stream(stream: TextIO, name: str = STDIN_NAME) -> Iterator[NumberedLine]:
    """Yield (lineno, line, name) for each line of an already-open text stream."""
    for lineno, line in enumerate(stream, 1):
        yield lineno, line, name


def read_lines(filepath: str) -> Iterator[NumberedLine]:
    """Yield (lineno, line, filepath) for a log file. Undecodable bytes are replaced."""
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        yield from read_stream(f, filepath)


def read_multiple(sources: list[str]) -> Iterator[NumberedLine]:
    """Chain sources in order; '-' reads stdin. Line numbers restart per source."""
    for source in sources:
        if source == STDIN_MARKER:
            yield from read_stream(sys.stdin)
        else:
            yield from read_lines(source)


def _is_glob(arg: str) -> bool:
    return any(c in arg for c in "*?[")


def expand_paths(args: list[str]) -> list[str]:
    """Resolve CLI arguments into an ordered, de-duplicated source list.

    No arguments selects stdin. Glob patterns expand in sorted order and may
    match nothing; a plain path that is not a file raises FileNotFoundError, as
    does an argument list that resolves to no sources at all.
    """
    if not args:
        return [STDIN_MARKER]

    sources: list[str] = []
    for arg in args:
        if arg == STDIN_MARKER:
            matches = [arg]
        elif _is_glob(arg):
            matches = sorted(glob.glob(arg))
        elif os.path.isfile(arg):
            matches = [arg]
        else:
            raise FileNotFoundError(f"File not found: {arg}")
        sources.extend(m for m in matches if m not in sources)

    if not sources:
        raise FileNotFoundError("No log files found matching the given paths")
    return sources
