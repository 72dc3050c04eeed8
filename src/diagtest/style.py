"""ANSI styles and the highlight severities used by the source renderer."""

from __future__ import annotations

from enum import Enum

from diagtest.records import DiagnosticRecord

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
RED_BACKGROUND = "\033[41m"
ORANGE_BACKGROUND_256 = "\033[48;5;202m"


class Highlight(Enum):
    """Per-character tag in the highlight overlay."""

    NONE = RESET
    WARN = ORANGE_BACKGROUND_256
    ERROR = RED_BACKGROUND

    @property
    def code(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _RANKS[self]


# Higher rank overwrites; equal or lower only fills NONE.
_RANKS = {
    Highlight.NONE: 0,
    Highlight.WARN: 1,
    Highlight.ERROR: 2,
}


def severity_of(record: DiagnosticRecord) -> Highlight:
    return Highlight.WARN if record.is_warning else Highlight.ERROR


def styled(text: str, *codes: str, color: bool = True) -> str:
    """Wrap text in the given codes followed by RESET, or return it as-is."""
    if not color or not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"
