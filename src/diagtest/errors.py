"""Exception taxonomy for diagtest."""

from __future__ import annotations


class DiagtestError(Exception):
    """Base class for all diagtest failures."""


class MalformedExpectation(DiagtestError):
    """An expectation line could not be parsed; the whole block is unreadable."""

    def __init__(self, message: str, line_number: int = 0, line: str = "") -> None:
        self.line_number = line_number
        self.line = line
        self.reason = message
        if line_number:
            message = f"line {line_number}: {message} ({line!r})"
        super().__init__(message)


class FixtureError(DiagtestError):
    """Raised when a fixture file cannot be read or split into sections."""


class FrontendError(DiagtestError):
    """Raised when a frontend breaks the result contract."""


class FrontendLoadError(FrontendError):
    """Raised when a frontend entry point cannot be resolved."""
