"""In-memory entity sets.

Reads come from the committed buckets of an `InMemoryDatabase`. Each set
also declares the constraints the relational schema enforces (required
attributes and foreign keys) so the in-memory unit of work can reject the
same commits the relational backend rejects.
"""

from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Literal, TypeVar

from coursemanager.domain import Author, Country, Course
from coursemanager.interfaces.entity_set import EntitySet

from .database import InMemoryDatabase, StoredRow

E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class ForeignKey:
    """Reference from an attribute to the key of another bucket."""

    attr: str
    bucket: str
    on_delete: Literal["restrict", "cascade"] = "restrict"


class InMemoryEntitySet(EntitySet[E]):
    """Shared mechanics for in-memory entity sets: get, find, count."""

    BUCKET_ATTR: ClassVar[str]  # e.g. "authors"
    KEY_TYPE: ClassVar[type] = object
    REQUIRED_ATTRS: ClassVar[tuple[str, ...]] = ()
    FOREIGN_KEYS: ClassVar[tuple[ForeignKey, ...]] = ()

    def __init__(self, database: InMemoryDatabase) -> None:
        super().__init__()
        self._database = database

    def bucket(self, database: InMemoryDatabase | None = None) -> dict[Any, StoredRow]:
        """Return this set's bucket in `database` (the committed store by default)."""
        return getattr(database or self._database, self.BUCKET_ATTR)

    def get(self, key: Any) -> E | None:
        if (row := self.bucket().get(key)) is None:
            return None
        return dataclasses.replace(row.entity)

    def find(
        self,
        where: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[E]:
        rows = self._matching(where)
        stop = None if limit is None else offset + limit
        return [dataclasses.replace(row.entity) for row in rows[offset:stop]]

    def count(self, where: Mapping[str, Any] | None = None) -> int:
        return len(self._matching(where))

    def _matching(self, where: Mapping[str, Any] | None) -> list[StoredRow]:
        criteria = dict(where or {})
        rows = sorted(self.bucket().values(), key=lambda row: row.seq)
        return [
            row
            for row in rows
            if all(getattr(row.entity, attr) == value for attr, value in criteria.items())
        ]


class InMemoryCountrySet(InMemoryEntitySet[Country]):
    """In-memory countries."""

    KIND = "country"
    BUCKET_ATTR = "countries"
    REQUIRED_ATTRS = ("description",)


class InMemoryAuthorSet(InMemoryEntitySet[Author]):
    """In-memory authors."""

    KIND = "author"
    BUCKET_ATTR = "authors"
    KEY_TYPE = uuid.UUID
    REQUIRED_ATTRS = ("last_name", "country_id")
    FOREIGN_KEYS = (ForeignKey("country_id", "countries"),)


class InMemoryCourseSet(InMemoryEntitySet[Course]):
    """In-memory courses."""

    KIND = "course"
    BUCKET_ATTR = "courses"
    KEY_TYPE = uuid.UUID
    REQUIRED_ATTRS = ("title", "author_id")
    FOREIGN_KEYS = (ForeignKey("author_id", "authors", on_delete="cascade"),)
