"""Boundary between diagtest and the compiler frontend under test.

A frontend is any callable ``(source, settings) -> FrontendResult``. It
reports diagnostics with offsets into the source it was given, which may
start with a synthetic prefix; ``collect_diagnostics`` maps them back onto
the fixture source and turns a crash into a record of its own.
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from diagtest.errors import FrontendError, FrontendLoadError
from diagtest.records import NO_LOCATION, DiagnosticRecord, escape_message

DEFAULT_CRASH_KIND = "UnimplementedFeatureError"


@dataclass(frozen=True)
class FrontendDiagnostic:
    """A diagnostic as the frontend reports it, before offset translation."""

    kind: str
    message: str | None
    start: int | None = None
    end: int | None = None


@dataclass(frozen=True)
class FrontendOk:
    diagnostics: Sequence[FrontendDiagnostic] = field(default_factory=tuple)


@dataclass(frozen=True)
class FrontendCrashed:
    """The frontend hit an internal failure after reporting ``diagnostics``."""

    message: str | None
    diagnostics: Sequence[FrontendDiagnostic] = field(default_factory=tuple)
    kind: str = DEFAULT_CRASH_KIND


FrontendResult = Union[FrontendOk, FrontendCrashed]

Frontend = Callable[[str, Mapping[str, str]], FrontendResult]


def translate_offset(offset: int | None, prefix_length: int) -> int:
    """Map an offset in the prefixed source onto the fixture source."""
    if offset is None or offset < prefix_length:
        return NO_LOCATION
    return offset - prefix_length


def collect_diagnostics(
    result: FrontendResult, prefix_length: int = 0,
) -> list[DiagnosticRecord]:
    """Reduce a frontend result to records, crash record first."""
    records: list[DiagnosticRecord] = []
    if isinstance(result, FrontendCrashed):
        records.append(DiagnosticRecord(
            result.kind, escape_message(result.message), NO_LOCATION, NO_LOCATION,
        ))
    for diag in result.diagnostics:
        records.append(DiagnosticRecord(
            diag.kind,
            escape_message(diag.message),
            translate_offset(diag.start, prefix_length),
            translate_offset(diag.end, prefix_length),
        ))
    return records


def run_frontend(
    frontend: Frontend,
    source: str,
    settings: Mapping[str, str] | None = None,
    *,
    prefix: str = "",
) -> list[DiagnosticRecord]:
    """Run ``frontend`` on ``prefix + source`` and collect its records."""
    result = frontend(prefix + source, dict(settings or {}))
    if not isinstance(result, (FrontendOk, FrontendCrashed)):
        raise FrontendError(
            f"frontend returned {type(result).__name__}, "
            "expected FrontendOk or FrontendCrashed"
        )
    return collect_diagnostics(result, len(prefix))


def load_frontend(entry: str, search_path: Path | None = None) -> Frontend:
    """Resolve a ``package.module:attribute`` entry point to a callable.

    ``search_path`` (usually the directory holding diagtest.toml) is on
    ``sys.path`` only while the entry module is imported.
    """
    module_name, sep, attr_path = entry.partition(":")
    if not sep or not module_name or not attr_path:
        raise FrontendLoadError(
            f"invalid frontend entry '{entry}' (expected 'module:callable')"
        )
    added = search_path is not None and str(search_path) not in sys.path
    if added:
        sys.path.insert(0, str(search_path))
    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as e:
        raise FrontendLoadError(f"cannot import '{module_name}': {e}") from e
    finally:
        if added:
            sys.path.remove(str(search_path))
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise FrontendLoadError(
                f"'{module_name}' has no attribute '{attr_path}'"
            ) from None
    if not callable(obj):
        raise FrontendLoadError(f"frontend entry '{entry}' is not callable")
    return obj  # type: ignore[return-value]
