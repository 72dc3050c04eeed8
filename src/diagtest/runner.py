"""Discover fixtures and run them against a frontend."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import TextIO

from diagtest.case import SyntaxTestCase, TestOutcome
from diagtest.errors import FixtureError, MalformedExpectation
from diagtest.frontend import Frontend
from diagtest.style import BOLD, GREEN, RED, styled


@dataclass
class RunSummary:
    """Outcome of running a batch of fixtures."""

    tests_run: int = 0
    tests_passed: int = 0
    tests_failed: int = 0
    failures: list[str] = field(default_factory=list)
    updated: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.tests_failed == 0


def discover_fixtures(paths: Iterable[Path], pattern: str = "*.sol") -> list[Path]:
    """Expand directories to the fixtures under them, sorted and de-duplicated."""
    found: set[Path] = set()
    for path in paths:
        if path.is_dir():
            found.update(p for p in path.rglob(pattern) if p.is_file())
        else:
            found.add(path)
    return sorted(found)


def _display_name(path: Path, base: Path | None) -> str:
    if base is not None:
        try:
            return str(path.resolve().relative_to(base.resolve()))
        except ValueError:
            pass
    return str(path)


def run_fixtures(
    fixtures: Iterable[Path],
    frontend: Frontend,
    stream: TextIO,
    *,
    prefix: str = "",
    line_prefix: str = "    ",
    formatted: bool = True,
    update: bool = False,
    base_dir: Path | None = None,
) -> RunSummary:
    """Run every fixture; a broken fixture fails alone, never the batch."""
    summary = RunSummary()

    for path in fixtures:
        name = _display_name(path, base_dir)
        summary.tests_run += 1
        stream.write(f"{name}: ")

        try:
            case = SyntaxTestCase.from_file(path)
        except (FixtureError, MalformedExpectation) as e:
            stream.write(styled("FAIL", BOLD, RED, color=formatted) + "\n")
            stream.write(f"{line_prefix}error: {e}\n")
            summary.tests_failed += 1
            summary.failures.append(name)
            continue

        # The diff is printed after the verdict, so buffer it.
        diff = StringIO()
        outcome = case.run(frontend, diff, line_prefix, formatted, prefix=prefix)

        if outcome is TestOutcome.SUCCESS:
            stream.write(styled("OK", BOLD, GREEN, color=formatted) + "\n")
            summary.tests_passed += 1
            continue

        stream.write(styled("FAIL", BOLD, RED, color=formatted) + "\n")
        stream.write(f"{line_prefix}Source:\n")
        case.print_source(stream, line_prefix + "  ", formatted)
        if formatted and case.source and not case.source.endswith("\n"):
            stream.write("\n")
        stream.write(diff.getvalue())
        summary.tests_failed += 1
        summary.failures.append(name)

        if update:
            path.write_text(case.updated_text())
            summary.updated.append(path)
            stream.write(f"{line_prefix}updated expectations in {name}\n")

    return summary
