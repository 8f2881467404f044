"""SQLAlchemy-backed Unit of Work for CourseManager.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection and the
table-backed entity sets. The connection is opened on first use, so the unit
works with or without a ``with`` block; leaving the block closes it. Staged
changes are executed in a single transaction on commit; any failure rolls the
whole batch back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import OperationalError, SQLAlchemyError

from coursemanager.interfaces.errors import PersistenceError
from coursemanager.interfaces.unit_of_work import AbstractUnitOfWork

from .entity_sets import SqlAlchemyAuthorSet, SqlAlchemyCountrySet, SqlAlchemyCourseSet

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    countries: SqlAlchemyCountrySet
    authors: SqlAlchemyAuthorSet
    courses: SqlAlchemyCourseSet

    def __init__(self, engine: Engine):
        self.engine = engine
        self._connection: Connection | None = None
        self.countries = SqlAlchemyCountrySet(self._connect)
        self.authors = SqlAlchemyAuthorSet(self._connect)
        self.courses = SqlAlchemyCourseSet(self._connect)

    def _connect(self) -> Connection:
        if self._connection is None:
            self._connection = self.engine.connect()
        return self._connection

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            if self._connection is not None:
                self._connection.close()
                self._connection = None

    def commit(self):
        connection = self._connect()
        applied = 0
        try:
            for entity_set, change in self.iter_changes():
                entity_set.apply(change)
                applied += 1
            connection.commit()
        except PersistenceError as e:
            connection.rollback()
            logger.warning("Commit rejected after %d change(s): %s", applied, e)
            raise
        except OperationalError as e:
            connection.rollback()
            raise PersistenceError(f"Database unavailable: {e.orig}") from e
        except SQLAlchemyError as e:
            connection.rollback()
            logger.warning("Commit failed after %d change(s): %s", applied, e)
            raise PersistenceError(f"Commit failed: {e}") from e
        self.discard_staged()
        logger.debug("Committed %d change(s) to %s", applied, self.engine.url)

    def rollback(self):
        self.discard_staged()
        if self._connection is not None:
            self._connection.rollback()
