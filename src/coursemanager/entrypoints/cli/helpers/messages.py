"""Terminal message helpers for the CourseManager CLI.

Status lines go to stderr so stdout stays machine-readable (``authors list``
output can be piped). Glyphs fall back to ASCII when stderr cannot encode them.
"""

import click

GLYPHS = {
    "warn": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the emoji for `kind` ("warn", "success" or "error"), or its ASCII fallback."""
    emoji, fallback = GLYPHS[kind]
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  This will modify your database.``
    """
    click.secho(f"{glyph('warn')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  Author added.``
    """
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
