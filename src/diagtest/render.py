"""Source highlighting and expected/obtained diff printing.

Everything here writes to a caller-supplied text stream and never raises
on well-formed records; an empty source renders nothing.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from diagtest.expectations import format_location, split_lines
from diagtest.records import DiagnosticRecord, records_equal
from diagtest.style import (
    BOLD,
    CYAN,
    GREEN,
    RED,
    RESET,
    YELLOW,
    Highlight,
    severity_of,
    styled,
)


def build_overlay(
    source: str, records: Sequence[DiagnosticRecord],
) -> list[Highlight]:
    """Tag every source character with the winning highlight.

    Records apply in list order. A severity of strictly higher rank
    overwrites the current tag; otherwise it only fills untagged cells.
    """
    overlay = [Highlight.NONE] * len(source)
    for record in records:
        if not record.has_range:
            continue
        severity = severity_of(record)
        start = min(record.range_start, len(source))
        end = min(record.range_end, len(source))
        for i in range(start, end):
            current = overlay[i]
            if severity.rank > current.rank or current is Highlight.NONE:
                overlay[i] = severity
    return overlay


def print_source(
    stream: TextIO,
    source: str,
    records: Sequence[DiagnosticRecord],
    line_prefix: str = "",
    formatted: bool = True,
) -> None:
    """Write the source, highlighting the ranges covered by ``records``."""
    if not formatted:
        for line in split_lines(source):
            stream.write(f"{line_prefix}{line}\n")
        return

    if not source:
        return

    overlay = build_overlay(source, records)
    current = overlay[0]
    stream.write(f"{line_prefix}{current.code}")
    for i, ch in enumerate(source):
        if overlay[i] is not current:
            current = overlay[i]
            stream.write(current.code)
        if ch != "\n":
            stream.write(ch)
            continue
        # Each visual line restarts its own styling.
        stream.write(f"{RESET}\n")
        if i + 1 < len(source):
            current = overlay[i + 1]
            stream.write(f"{line_prefix}{current.code}")
    stream.write(RESET)


def print_record_list(
    stream: TextIO,
    records: Sequence[DiagnosticRecord],
    line_prefix: str = "",
    formatted: bool = True,
) -> None:
    if not records:
        stream.write(styled(f"{line_prefix}Success", BOLD, GREEN, color=formatted) + "\n")
        return
    for record in records:
        kind_color = YELLOW if record.is_warning else RED
        header = styled(f"{line_prefix}{record.kind}: ", BOLD, kind_color, color=formatted)
        stream.write(f"{header}{format_location(record)}{record.message}\n")


def print_expectation_and_result(
    stream: TextIO,
    expected: Sequence[DiagnosticRecord],
    obtained: Sequence[DiagnosticRecord],
    line_prefix: str = "",
    formatted: bool = True,
) -> bool:
    """Print both lists when they differ. Returns True when they match."""
    if records_equal(expected, obtained):
        return True
    next_indent = line_prefix + "  "
    stream.write(styled(f"{line_prefix}Expected result:", BOLD, CYAN, color=formatted) + "\n")
    print_record_list(stream, expected, next_indent, formatted)
    stream.write(styled(f"{line_prefix}Obtained result:", BOLD, CYAN, color=formatted) + "\n")
    print_record_list(stream, obtained, next_indent, formatted)
    return False
