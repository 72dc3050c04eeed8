"""TOML config loading for diagtest.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_NAME = "diagtest.toml"


@dataclass
class FrontendConfig:
    entry: str = ""
    prefix: str = ""


@dataclass
class TestsConfig:
    __test__ = False

    root: str = "fixtures"
    pattern: str = "*.sol"


@dataclass
class OutputConfig:
    color: bool = True
    line_prefix: str = "    "


@dataclass
class DiagtestConfig:
    frontend: FrontendConfig = field(default_factory=FrontendConfig)
    tests: TestsConfig = field(default_factory=TestsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    base_dir: Path = field(default_factory=Path.cwd)

    @property
    def fixtures_dir(self) -> Path:
        return self.base_dir / self.tests.root


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find diagtest.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> DiagtestConfig:
    """Parse a diagtest.toml file into a DiagtestConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = DiagtestConfig(base_dir=path.parent)

    if "frontend" in data:
        fe = data["frontend"]
        config.frontend = FrontendConfig(
            entry=fe.get("entry", ""),
            prefix=fe.get("prefix", ""),
        )

    if "tests" in data:
        tst = data["tests"]
        config.tests = TestsConfig(
            root=tst.get("root", "fixtures"),
            pattern=tst.get("pattern", "*.sol"),
        )

    if "output" in data:
        out = data["output"]
        config.output = OutputConfig(
            color=out.get("color", True),
            line_prefix=out.get("line_prefix", "    "),
        )

    return config
