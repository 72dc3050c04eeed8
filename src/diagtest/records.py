"""Diagnostic records shared by expectations and frontend output."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

NO_LOCATION = -1

WARNING_KIND = "Warning"


@dataclass(frozen=True)
class DiagnosticRecord:
    """One reported condition: kind, single-line message and source range.

    ``range_start`` and ``range_end`` are half-open character offsets into
    the original fixture source, or ``NO_LOCATION`` when unknown.
    """

    kind: str
    message: str
    range_start: int = NO_LOCATION
    range_end: int = NO_LOCATION

    @property
    def has_range(self) -> bool:
        return self.range_start >= 0 and self.range_end >= 0

    @property
    def is_warning(self) -> bool:
        return self.kind == WARNING_KIND


def escape_message(message: str | None) -> str:
    """Flatten a frontend message into the single-line stored form."""
    if not message:
        return "NONE"
    return message.replace("\r", "\\r").replace("\n", "\\n")


def records_equal(
    expected: Sequence[DiagnosticRecord], obtained: Sequence[DiagnosticRecord],
) -> bool:
    """Order-sensitive equality of two record lists."""
    if len(expected) != len(obtained):
        return False
    return all(e == o for e, o in zip(expected, obtained))
