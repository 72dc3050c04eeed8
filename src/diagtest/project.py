"""Project scaffolding for `diagtest init`."""

from __future__ import annotations

from pathlib import Path

from diagtest.config import CONFIG_NAME

_CONFIG_TEMPLATE = """\
[frontend]
# Callable taking (source, settings) and returning FrontendOk/FrontendCrashed.
entry = "{entry}"
prefix = ""

[tests]
root = "fixtures"
pattern = "*.sol"

[output]
color = true
line_prefix = "    "
"""

_SAMPLE_FIXTURE = """\
contract C {
    function f() public { uint x; }
}
// ----
// Warning: (39-45): Unused local variable.
"""


def scaffold(directory: Path | None = None, *, entry: str = "") -> Path:
    """Write diagtest.toml and a sample fixture. Returns the config path."""
    base = directory or Path.cwd()
    config_path = base / CONFIG_NAME

    if config_path.exists():
        raise FileExistsError(f"'{config_path}' already exists")

    fixtures_dir = base / "fixtures"
    fixtures_dir.mkdir(parents=True, exist_ok=True)

    config_path.write_text(_CONFIG_TEMPLATE.format(entry=entry))

    sample = fixtures_dir / "unused_variable.sol"
    if not sample.exists():
        sample.write_text(_SAMPLE_FIXTURE)

    return config_path
