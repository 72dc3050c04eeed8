"""Check compiler diagnostics against expectations embedded in test fixtures."""

__version__ = "0.1.0"
