"""OSC-8 hyperlink utilities for the CourseManager CLI.

Detects whether the active text stream is likely to render OSC-8 terminal
hyperlinks and renders a URL as a clickable link, falling back to plain text.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether `stream` supports OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: False for non-TTY streams; otherwise True when the terminal is
        on a small allowlist (VS Code, iTerm2, WezTerm, Kitty, Windows
        Terminal, VTE-based, Alacritty, Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return `label` (default: `url`) linked to `url` when supported.

    Uses BEL (``\\x07``) as the OSC-8 terminator.
    """
    text = label if label is not None else url
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
