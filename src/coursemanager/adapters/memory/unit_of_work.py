"""In-memory Unit of Work for CourseManager.

Applies staged changes to a working copy of the shared `InMemoryDatabase`
and swaps it in only when every change succeeded, which gives the same
all-or-nothing commit the relational backend gets from its transaction.

Constraint checks follow the order SQLite applies them per statement:
required values, then key uniqueness, then foreign keys.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from coursemanager.interfaces.entity_set import ChangeKind, StagedChange
from coursemanager.interfaces.errors import (
    ConcurrencyError,
    DuplicateKeyError,
    ForeignKeyViolationError,
    PersistenceError,
    RequiredValueMissingError,
)
from coursemanager.interfaces.unit_of_work import AbstractUnitOfWork

from .database import InMemoryDatabase, StoredRow
from .entity_sets import (
    InMemoryAuthorSet,
    InMemoryCountrySet,
    InMemoryCourseSet,
    InMemoryEntitySet,
)

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work over a shared `InMemoryDatabase`."""

    countries: InMemoryCountrySet
    authors: InMemoryAuthorSet
    courses: InMemoryCourseSet

    def __init__(self, database: InMemoryDatabase):
        self.database = database
        self.countries = InMemoryCountrySet(database)
        self.authors = InMemoryAuthorSet(database)
        self.courses = InMemoryCourseSet(database)

    def commit(self):
        working = self.database.snapshot()
        applied = 0
        try:
            for entity_set, change in self.iter_changes():
                self._apply(working, entity_set, change)
                applied += 1
        except PersistenceError as e:
            logger.warning("Commit rejected after %d change(s): %s", applied, e)
            raise
        self.database.restore(working)
        self.discard_staged()
        logger.debug("Committed %d change(s) to %s", applied, self.database.name)

    def rollback(self):
        self.discard_staged()

    # --- change application ---

    def _apply(
        self,
        working: InMemoryDatabase,
        entity_set: InMemoryEntitySet[Any],
        change: StagedChange[Any],
    ) -> None:
        match change.kind:
            case ChangeKind.ADDED:
                self._insert(working, entity_set, change.entity)
            case ChangeKind.MODIFIED:
                self._update(working, entity_set, change.entity)
            case ChangeKind.REMOVED:
                self._delete(working, entity_set, entity_set.key_of(change.entity))

    def _insert(
        self, working: InMemoryDatabase, entity_set: InMemoryEntitySet[Any], entity
    ) -> None:
        key = entity_set.key_of(entity)
        self._check_required(entity_set, entity)
        self._check_key_type(entity_set, key)
        bucket = entity_set.bucket(working)
        if key in bucket:
            raise DuplicateKeyError(entity_set.KIND, str(key), "key already exists")
        self._check_references(working, entity_set, entity)
        seq = working.next_seq(entity_set.BUCKET_ATTR)
        bucket[key] = StoredRow(seq=seq, entity=dataclasses.replace(entity))

    def _update(
        self, working: InMemoryDatabase, entity_set: InMemoryEntitySet[Any], entity
    ) -> None:
        key = entity_set.key_of(entity)
        bucket = entity_set.bucket(working)
        if (row := bucket.get(key)) is None:
            raise ConcurrencyError(entity_set.KIND, str(key))
        self._check_required(entity_set, entity)
        self._check_references(working, entity_set, entity)
        bucket[key] = StoredRow(seq=row.seq, entity=dataclasses.replace(entity))

    def _delete(
        self, working: InMemoryDatabase, entity_set: InMemoryEntitySet[Any], key
    ) -> None:
        bucket = entity_set.bucket(working)
        if key not in bucket:
            raise ConcurrencyError(entity_set.KIND, str(key))

        for dependent in self.entity_sets:
            for fk in dependent.FOREIGN_KEYS:
                if fk.bucket != entity_set.BUCKET_ATTR:
                    continue
                referencing = [
                    dependent.key_of(row.entity)
                    for row in dependent.bucket(working).values()
                    if getattr(row.entity, fk.attr) == key
                ]
                if referencing and fk.on_delete == "restrict":
                    raise ForeignKeyViolationError(
                        entity_set.KIND,
                        str(key),
                        f"still referenced by {dependent.KIND} ({referencing[0]})",
                    )
                for dependent_key in referencing:
                    self._delete(working, dependent, dependent_key)

        del bucket[key]

    # --- constraint checks ---

    @staticmethod
    def _check_required(entity_set: InMemoryEntitySet[Any], entity) -> None:
        key = entity_set.key_of(entity)
        for attr in (entity_set.KEY_ATTR, *entity_set.REQUIRED_ATTRS):
            if getattr(entity, attr) is None:
                raise RequiredValueMissingError(
                    entity_set.KIND, str(key), f"{attr} is required"
                )

    @staticmethod
    def _check_key_type(entity_set: InMemoryEntitySet[Any], key) -> None:
        if not isinstance(key, entity_set.KEY_TYPE):
            raise PersistenceError(
                f"{entity_set.KIND} key {key!r} is not a {entity_set.KEY_TYPE.__name__}"
            )

    @staticmethod
    def _check_references(
        working: InMemoryDatabase, entity_set: InMemoryEntitySet[Any], entity
    ) -> None:
        for fk in entity_set.FOREIGN_KEYS:
            value = getattr(entity, fk.attr)
            if value not in getattr(working, fk.bucket):
                raise ForeignKeyViolationError(
                    entity_set.KIND,
                    str(entity_set.key_of(entity)),
                    f"{fk.attr}={value!r} does not reference an existing row",
                )
