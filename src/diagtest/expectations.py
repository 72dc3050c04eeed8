"""Parser for expected-diagnostic lines in fixture files.

Each non-blank line of an expectations block describes one record::

    // Warning: (10-14): Unused variable.
    // TypeError: Some message

The scanner threads an explicit cursor through small pure helpers; each
returns the new position (and the value read, where there is one) or
raises ``MalformedExpectation`` at the first unsatisfied requirement.
"""

from __future__ import annotations

from collections.abc import Iterable

from diagtest.errors import MalformedExpectation
from diagtest.records import NO_LOCATION, DiagnosticRecord

COMMENT_CHAR = "/"

# ASCII only; other Unicode spaces belong to the kind or message.
_WHITESPACE = " \t\n\v\f\r"


# ── Cursor helpers ───────────────────────────────────────────────


def _skip_slashes(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] == COMMENT_CHAR:
        pos += 1
    return pos


def _skip_whitespace(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] in _WHITESPACE:
        pos += 1
    return pos


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _parse_unsigned(line: str, pos: int) -> tuple[int, int]:
    if pos >= len(line) or not _is_digit(line[pos]):
        raise MalformedExpectation("source location expected")
    value = 0
    while pos < len(line) and _is_digit(line[pos]):
        value = value * 10 + (ord(line[pos]) - ord("0"))
        pos += 1
    return value, pos


def _expect(line: str, pos: int, ch: str) -> int:
    if pos >= len(line) or line[pos] != ch:
        raise MalformedExpectation(f"'{ch}' expected")
    return pos + 1


def _parse_location(line: str, pos: int) -> tuple[int, int, int]:
    """Parse ``(start-end):`` with the cursor on the opening paren."""
    pos = _expect(line, pos, "(")
    start, pos = _parse_unsigned(line, pos)
    pos = _expect(line, pos, "-")
    end, pos = _parse_unsigned(line, pos)
    pos = _expect(line, pos, ")")
    pos = _expect(line, pos, ":")
    return start, end, pos


# ── Public API ───────────────────────────────────────────────────


def parse_expectation_line(line: str) -> DiagnosticRecord | None:
    """Parse one line; blank and comment-only lines yield None."""
    pos = _skip_slashes(line, 0)
    pos = _skip_whitespace(line, pos)
    if pos >= len(line):
        return None

    kind_start = pos
    while pos < len(line) and line[pos] != ":":
        pos += 1
    kind = line[kind_start:pos]

    if pos < len(line):
        pos += 1
    pos = _skip_whitespace(line, pos)

    start = end = NO_LOCATION
    if pos < len(line) and line[pos] == "(":
        start, end, pos = _parse_location(line, pos)

    pos = _skip_whitespace(line, pos)
    return DiagnosticRecord(kind, line[pos:], start, end)


def split_lines(text: str, keepends: bool = False) -> list[str]:
    """Split on "\\n" only; form feeds and Unicode separators stay in the line."""
    lines = text.split("\n")
    if keepends:
        lines = [line + "\n" for line in lines[:-1]] + [lines[-1]]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def parse_expectations(text: str | Iterable[str]) -> list[DiagnosticRecord]:
    """Parse an expectations block into records, in file order.

    Any malformed line aborts the whole block.
    """
    lines = split_lines(text) if isinstance(text, str) else text
    records: list[DiagnosticRecord] = []
    for number, line in enumerate(lines, start=1):
        line = line.removesuffix("\n")
        try:
            record = parse_expectation_line(line)
        except MalformedExpectation as e:
            raise MalformedExpectation(e.reason, number, line) from None
        if record is not None:
            records.append(record)
    return records


def format_location(record: DiagnosticRecord) -> str:
    """The ``(start-end): `` segment, or "" when both bounds are unknown."""
    if record.range_start < 0 and record.range_end < 0:
        return ""
    start = str(record.range_start) if record.range_start >= 0 else ""
    end = str(record.range_end) if record.range_end >= 0 else ""
    return f"({start}-{end}): "


def format_expectation(record: DiagnosticRecord, comment: str = "// ") -> str:
    return f"{comment}{record.kind}: {format_location(record)}{record.message}"


def format_expectations(records: Iterable[DiagnosticRecord], comment: str = "// ") -> str:
    """Inverse of parse_expectations, one line per record."""
    return "".join(format_expectation(r, comment) + "\n" for r in records)
