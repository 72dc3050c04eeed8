"""Shared test helpers for the diagtest test suite."""

from __future__ import annotations

import re
from collections.abc import Mapping

from diagtest.frontend import (
    FrontendCrashed,
    FrontendDiagnostic,
    FrontendOk,
    FrontendResult,
)
from diagtest.records import DiagnosticRecord

NOT_CALLABLE = 42

PASSING_FIXTURE = """\
x = unused;
y = 1;
// ----
// Warning: (4-10): unused token
"""

FAILING_FIXTURE = """\
z = bad;
// ----
"""

BROKEN_FIXTURE = """\
z = 1;
// ----
// Error: (5-
"""

_TOY_TOKEN = re.compile(r"\b(unused|bad)\b")


def error(message: str, start: int = -1, end: int = -1, kind: str = "Error") -> DiagnosticRecord:
    return DiagnosticRecord(kind, message, start, end)


def warning(message: str, start: int = -1, end: int = -1) -> DiagnosticRecord:
    return DiagnosticRecord("Warning", message, start, end)


def toy_frontend(source: str, settings: Mapping[str, str]) -> FrontendResult:
    """Warn on every `unused`, error on every `bad`; crash on `crash: true`."""
    diagnostics = []
    for m in _TOY_TOKEN.finditer(source):
        kind = "Warning" if m.group(1) == "unused" else "Error"
        diagnostics.append(
            FrontendDiagnostic(kind, f"{m.group(1)} token", m.start(), m.end())
        )
    if settings.get("crash") == "true":
        return FrontendCrashed("not implemented\nyet", diagnostics)
    return FrontendOk(diagnostics)
