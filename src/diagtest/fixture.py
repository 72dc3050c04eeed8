"""Fixture files: source, optional settings and expected diagnostics.

Layout::

    contract C { uint x; }
    // ====
    // optimize: true
    // ----
    // Warning: (13-19): Unused variable.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from diagtest.errors import FixtureError
from diagtest.expectations import format_expectations, split_lines
from diagtest.records import DiagnosticRecord

SETTINGS_DELIMITER = "// ===="
EXPECTATIONS_DELIMITER = "// ----"

_SETTING_RE = re.compile(r"^//\s*([^:\s][^:]*?)\s*:\s*(.*?)\s*$")


@dataclass
class Fixture:
    source: str
    settings: dict[str, str] = field(default_factory=dict)
    expectations_text: str = ""
    path: Path | None = None

    @property
    def name(self) -> str:
        return str(self.path) if self.path is not None else "<fixture>"


def parse_fixture(text: str, path: Path | None = None) -> Fixture:
    """Split fixture text into its three sections."""
    source: list[str] = []
    settings: dict[str, str] = {}
    expectations: list[str] = []
    section = "source"

    for number, line in enumerate(split_lines(text, keepends=True), start=1):
        marker = line.rstrip()
        if section != "expectations" and marker == EXPECTATIONS_DELIMITER:
            section = "expectations"
            continue
        if section == "source" and marker == SETTINGS_DELIMITER:
            section = "settings"
            continue

        if section == "source":
            source.append(line)
        elif section == "settings":
            if not marker.strip("/ \t"):
                continue
            m = _SETTING_RE.match(marker)
            if m is None:
                where = f"{path}:{number}" if path is not None else f"line {number}"
                raise FixtureError(f"{where}: invalid setting line {marker!r}")
            settings[m.group(1)] = m.group(2)
        else:
            expectations.append(line)

    return Fixture(
        source="".join(source),
        settings=settings,
        expectations_text="".join(expectations),
        path=path,
    )


def load_fixture(path: Path) -> Fixture:
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureError(f"cannot open fixture '{path}': {e}") from e
    return parse_fixture(text, path)


def render_fixture(fixture: Fixture, expectations: Iterable[DiagnosticRecord]) -> str:
    """Rebuild fixture text with a new expectations section."""
    parts: list[str] = [fixture.source]
    if fixture.source and not fixture.source.endswith("\n"):
        parts.append("\n")
    if fixture.settings:
        parts.append(SETTINGS_DELIMITER + "\n")
        for key, value in fixture.settings.items():
            parts.append(f"// {key}: {value}\n")
    parts.append(EXPECTATIONS_DELIMITER + "\n")
    parts.append(format_expectations(expectations))
    return "".join(parts)
