"""Database engine factory and helpers.

This module centralizes creation of SQLAlchemy Engines and applies
backend-specific tuning:

- **SQLite**: adds connection PRAGMAs to enforce foreign keys, enable WAL,
  and tune durability/temporary storage. Private ``:memory:`` databases are
  served from a single static connection, since each new SQLite connection
  to ``:memory:`` would otherwise open a brand-new, empty database.
- **Other backends**: no tuning applied here.

Use this module whenever you need an Engine so that all connections are
consistently configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}
SQLITE_MEMORY_DATABASES = {None, "", ":memory:"}


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite.

    Args:
        url: A database URL string or SQLAlchemy :class:`URL`.

    Returns:
        bool: True if the backend is SQLite, otherwise False.
    """
    u = make_url(str(url))
    return u.get_backend_name() in SQLITE_NAMES


def is_sqlite_memory(url: str | URL) -> bool:
    """Return True if the URL points at a private in-memory SQLite database."""
    return is_sqlite(url) and make_url(str(url)).database in SQLITE_MEMORY_DATABASES


def make_engine(
    url: str | URL, *, echo: bool = False, logging_name: str | None = None
) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    If the backend is SQLite, applies a set of PRAGMAs to improve safety and
    concurrency for development/test usage:
        - ``foreign_keys=ON`` (enforce referential integrity)
        - ``journal_mode=WAL`` (write-ahead logging for concurrency)
        - ``synchronous=NORMAL`` (balanced durability)
        - ``temp_store=MEMORY`` (reduce temp file I/O)

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.
        logging_name: Optional suffix for the engine's logger
            (``sqlalchemy.engine.Engine.<logging_name>``), so that a single
            engine's SQL can be routed to its own handler.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """

    kwargs: dict[str, Any] = {}
    if logging_name is not None:
        kwargs["logging_name"] = logging_name
    if is_sqlite_memory(url):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}

    engine = create_engine(url, echo=echo, future=True, **kwargs)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    return engine
