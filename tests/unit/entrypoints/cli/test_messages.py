"""Unit tests for :mod:`coursemanager.entrypoints.cli.helpers.messages`.

Covers glyph selection against the current stderr encoding and that
``warn``/``success``/``error`` write styled lines to stderr only.
"""

import io
import sys

import click
import pytest

from coursemanager.entrypoints.cli.helpers.messages import (
    _supports_character,
    error,
    glyph,
    success,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that claims to be a TTY with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding."""
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", {"warn": "[!]", "success": "[OK]", "error": "[X]"}),
        ("utf-8", {"warn": "⚠️", "success": "✅", "error": "❌"}),
    ],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    """Glyphs fall back to ASCII when stderr cannot encode the emoji."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert {kind: glyph(kind) for kind in expected} == expected


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stream is looked up on every call, not cached."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(next(encodings)))

    assert _supports_character("✅") is False
    assert _supports_character("✅") is True


@pytest.mark.parametrize(
    ("func", "color_code", "ascii_glyph"),
    [(warn, SET_YELLOW, "[!]"), (success, SET_GREEN, "[OK]"), (error, SET_RED, "[X]")],
)
def test_messages_emit_styled_stderr(monkeypatch, func, color_code, ascii_glyph):
    """Each helper writes a bold, colored line with its glyph."""
    stream = FakeTTY("ascii")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    func("careful")

    out = stream.getvalue()
    assert ascii_glyph in out
    assert "careful" in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


def test_success_writes_to_stderr_only(capsys):
    """Status lines never reach stdout."""
    success("done")

    captured = capsys.readouterr()
    assert "done" in captured.err
    assert captured.out == ""
