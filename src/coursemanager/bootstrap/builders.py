"""Builders for isolated, transient units of work.

Each builder owns one private store for its lifetime and hands out a fresh
unit of work per `build()` call, so data committed through one unit of work
is visible to the next. Two builders never share data.

- `InMemoryUnitOfWorkBuilder`: a uniquely named `InMemoryDatabase`.
- `SqliteUnitOfWorkBuilder`: a private ``:memory:`` SQLite database kept alive
  by a single static connection, with the schema created up front. SQL emitted
  by its engine can be forwarded to a callable for test diagnostics.

Both are context managers; leaving the ``with`` block releases the store.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

from coursemanager.adapters.db.engine import make_engine
from coursemanager.adapters.db.metadata import metadata
from coursemanager.adapters.memory import InMemoryDatabase, InMemoryUnitOfWork
from coursemanager.adapters.sqlalchemy_adapters import SqlAlchemyUnitOfWork
from coursemanager.logging import CallbackHandler

logger = logging.getLogger(__name__)

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"
ENGINE_LOGGER_PREFIX = "sqlalchemy.engine.Engine"


class InMemoryUnitOfWorkBuilder:
    """Hands out in-memory units of work over one private store.

    Args:
        name: Name of the store; a unique name is generated when omitted.
    """

    def __init__(self, name: str | None = None) -> None:
        self.database = InMemoryDatabase(
            name=name if name is not None else f"coursemanager-{uuid.uuid4()}"
        )
        logger.debug("Created in-memory store %s", self.database.name)

    def build(self) -> InMemoryUnitOfWork:
        """Return a new unit of work over this builder's store."""
        return InMemoryUnitOfWork(self.database)

    def close(self) -> None:
        """Release the store. Nothing to do for the in-memory backend."""

    def __enter__(self) -> InMemoryUnitOfWorkBuilder:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class SqliteUnitOfWorkBuilder:
    """Hands out SQLAlchemy units of work over one private SQLite database.

    Args:
        log_to: Optional callable receiving one line per SQL log record
            emitted by this builder's engine.
        level: Minimum level forwarded to `log_to`. SQLAlchemy logs
            statements at INFO and result rows at DEBUG.
    """

    def __init__(
        self,
        log_to: Callable[[str], object] | None = None,
        level: int = logging.INFO,
    ) -> None:
        self.logging_name = f"coursemanager-{uuid.uuid4().hex[:8]}"
        self.engine = make_engine(SQLITE_MEMORY_URL, logging_name=self.logging_name)
        self._sql_logger: logging.Logger | None = None
        self._handler: CallbackHandler | None = None

        if log_to is not None:
            self._sql_logger = logging.getLogger(
                f"{ENGINE_LOGGER_PREFIX}.{self.logging_name}"
            )
            self._handler = CallbackHandler(log_to, level=level)
            self._sql_logger.addHandler(self._handler)
            self._sql_logger.setLevel(level)

        metadata.create_all(self.engine)
        logger.debug("Created SQLite store %s", self.logging_name)

    def build(self) -> SqlAlchemyUnitOfWork:
        """Return a new unit of work over this builder's database."""
        return SqlAlchemyUnitOfWork(self.engine)

    def close(self) -> None:
        """Dispose the engine (dropping the database) and detach the log sink."""
        self.engine.dispose()
        if self._sql_logger is not None and self._handler is not None:
            self._sql_logger.removeHandler(self._handler)
            self._sql_logger.setLevel(logging.NOTSET)
            self._handler = None

    def __enter__(self) -> SqliteUnitOfWorkBuilder:
        return self

    def __exit__(self, *args) -> None:
        self.close()
