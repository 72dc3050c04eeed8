"""Tests for the pygments fixture lexer."""

from __future__ import annotations

from pygments.token import Comment, Generic, Name, Number, String

from diagtest.highlight import ExpectationLexer
from tests.helpers import PASSING_FIXTURE


def _tokens(text: str) -> list:
    return [(tok, value) for tok, value in ExpectationLexer().get_tokens(text) if value]


class TestExpectationLexer:
    def test_expectation_line(self):
        tokens = _tokens(PASSING_FIXTURE)
        assert (Comment.Special, "// ----\n") in tokens
        assert (Generic.Subheading, "Warning") in tokens
        assert (Number.Integer, "4") in tokens
        assert (Number.Integer, "10") in tokens
        assert (String, "unused token") in tokens

    def test_error_kind_and_no_range(self):
        tokens = _tokens("x\n// ----\n// TypeError: Some message\n")
        assert (Generic.Error, "TypeError") in tokens
        assert (String, "Some message") in tokens

    def test_settings(self):
        tokens = _tokens("x\n// ====\n// optimize: true\n// ----\n// Error: e\n")
        assert (Name.Attribute, "optimize") in tokens
        assert (String, "true") in tokens
        assert (Generic.Error, "Error") in tokens

    def test_source_is_plain(self):
        tokens = _tokens("unused Warning: (1-2): x\n")
        assert all(tok not in (Generic.Subheading, Number.Integer) for tok, _ in tokens)

    def test_text_preserved(self):
        text = "a\n// ====\n// k: v\n// ----\n// Warning: (1-2): m\n// Error: (5-\n"
        assert "".join(value for _, value in ExpectationLexer().get_tokens(text)) == text
