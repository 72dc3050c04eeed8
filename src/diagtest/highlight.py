"""Pygments lexer for diagtest fixture files."""

from pygments.lexer import RegexLexer, bygroups, default
from pygments.token import (
    Comment,
    Generic,
    Name,
    Number,
    Punctuation,
    String,
    Text,
)


class ExpectationLexer(RegexLexer):
    """Highlights the settings and expectation sections of a fixture.

    Source above the delimiters is left as plain text; the frontend's own
    lexer is the right tool for that part.
    """

    name = "Diagtest fixture"
    aliases = ["diagtest"]
    filenames = []
    mimetypes = ["text/x-diagtest"]

    tokens = {
        "root": [
            (r"^// ====[ \t]*\n", Comment.Special, "settings"),
            (r"^// ----[ \t]*\n", Comment.Special, "expectations"),
            (r"[^\n]*\n", Text),
            (r"[^\n]+", Text),
        ],
        "settings": [
            (r"^// ----[ \t]*\n", Comment.Special, ("#pop", "expectations")),
            (
                r"^(/+[ \t]*)([^:\n]+)(:)([ \t]*)([^\n]*)(\n)",
                bygroups(Comment.Single, Name.Attribute, Punctuation, Text, String, Text),
            ),
            (r"[^\n]*\n", Text),
            (r"[^\n]+", Text),
        ],
        "expectations": [
            # Kind: (start-end): message
            (
                r"^(/*[ \t]*)(Warning)(:[ \t]*)",
                bygroups(Comment.Single, Generic.Subheading, Punctuation),
                "location",
            ),
            (
                r"^(/*[ \t]*)([^:\n]+)(:[ \t]*)",
                bygroups(Comment.Single, Generic.Error, Punctuation),
                "location",
            ),
            (r"[^\n]*\n", Text),
            (r"[^\n]+", Text),
        ],
        "location": [
            (
                r"(\()([0-9]+)(-)([0-9]+)(\):[ \t]*)",
                bygroups(Punctuation, Number.Integer, Punctuation, Number.Integer, Punctuation),
                ("#pop", "message"),
            ),
            default(("#pop", "message")),
        ],
        "message": [
            (r"[^\n]+", String),
            (r"\n", Text, "#pop"),
        ],
    }
