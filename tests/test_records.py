"""Tests for diagnostic records and the list comparator."""

from __future__ import annotations

import dataclasses

import pytest

from diagtest.records import DiagnosticRecord, escape_message, records_equal
from tests.helpers import error, warning


class TestDiagnosticRecord:
    def test_defaults_to_no_range(self):
        record = DiagnosticRecord("Error", "m")
        assert (record.range_start, record.range_end) == (-1, -1)
        assert not record.has_range

    def test_has_range_needs_both_bounds(self):
        assert DiagnosticRecord("Error", "m", 0, 0).has_range
        assert not DiagnosticRecord("Error", "m", 0, -1).has_range
        assert not DiagnosticRecord("Error", "m", -1, 3).has_range

    def test_is_warning_is_exact(self):
        assert warning("w").is_warning
        assert not DiagnosticRecord("warning", "w").is_warning
        assert not DiagnosticRecord("Warnings", "w").is_warning

    def test_frozen(self):
        record = error("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.message = "y"  # type: ignore[misc]


class TestEscapeMessage:
    def test_newlines_escaped(self):
        assert escape_message("first\nsecond\n") == "first\\nsecond\\n"

    def test_carriage_return_escaped(self):
        assert escape_message("x\r\ny") == "x\\r\\ny"

    def test_missing_message(self):
        assert escape_message(None) == "NONE"
        assert escape_message("") == "NONE"

    def test_plain_message_unchanged(self):
        assert escape_message("Unused variable.") == "Unused variable."


class TestRecordsEqual:
    def test_equal(self):
        assert records_equal([error("a", 1, 2)], [error("a", 1, 2)])
        assert records_equal([], [])

    def test_length_mismatch(self):
        assert not records_equal([error("a")], [error("a"), error("a")])

    def test_every_field_compared(self):
        base = error("a", 1, 2)
        for other in (
            error("a", 1, 2, kind="TypeError"),
            error("b", 1, 2),
            error("a", 0, 2),
            error("a", 1, 3),
        ):
            assert not records_equal([base], [other])

    def test_order_sensitive(self):
        a, b = error("a"), warning("b")
        assert not records_equal([a, b], [b, a])

    def test_duplicates_count(self):
        a = error("a")
        assert not records_equal([a], [a, a])
