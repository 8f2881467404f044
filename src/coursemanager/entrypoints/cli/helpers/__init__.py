"""CLI helpers for CourseManager.

Utilities used by the command-line interface: URL sanitization for safe display,
OSC-8 terminal hyperlinks when supported, and message emitters that write to
stderr with emoji→ASCII fallbacks, and `open_repositories` for commands that
read or write the catalog.
"""

from .db_url import sanitize_url
from .hyperlinks import hyperlink
from .messages import error, success, warn
from .session import open_repositories, require_db_url

__all__ = [
    "error",
    "hyperlink",
    "open_repositories",
    "require_db_url",
    "sanitize_url",
    "success",
    "warn",
]
