"""A single fixture checked against one frontend run."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TextIO

from diagtest.expectations import parse_expectations
from diagtest.fixture import Fixture, load_fixture, render_fixture
from diagtest.frontend import Frontend, run_frontend
from diagtest.records import DiagnosticRecord
from diagtest.render import print_expectation_and_result, print_source


class TestOutcome(Enum):
    __test__ = False

    SUCCESS = "success"
    FAILURE = "failure"


class SyntaxTestCase:
    """Expected diagnostics of one fixture and the diagnostics last obtained.

    Expectations are parsed eagerly, so a malformed block raises
    ``MalformedExpectation`` from the constructor.
    """

    def __init__(self, fixture: Fixture) -> None:
        self.fixture = fixture
        self.expectations: list[DiagnosticRecord] = parse_expectations(
            fixture.expectations_text
        )
        self.obtained: list[DiagnosticRecord] = []

    @classmethod
    def from_file(cls, path: Path) -> SyntaxTestCase:
        return cls(load_fixture(path))

    @property
    def source(self) -> str:
        return self.fixture.source

    def run(
        self,
        frontend: Frontend,
        stream: TextIO,
        line_prefix: str = "",
        formatted: bool = True,
        *,
        prefix: str = "",
    ) -> TestOutcome:
        """Run the frontend and print the diff when results disagree."""
        self.obtained = run_frontend(
            frontend, self.fixture.source, self.fixture.settings, prefix=prefix,
        )
        if print_expectation_and_result(
            stream, self.expectations, self.obtained, line_prefix, formatted,
        ):
            return TestOutcome.SUCCESS
        return TestOutcome.FAILURE

    def print_source(
        self, stream: TextIO, line_prefix: str = "", formatted: bool = True,
    ) -> None:
        """Render the source highlighted with the obtained diagnostics."""
        print_source(stream, self.fixture.source, self.obtained, line_prefix, formatted)

    def updated_text(self) -> str:
        """Fixture text with the obtained diagnostics as expectations."""
        return render_fixture(self.fixture, self.obtained)
