"""Entity set interface.

An `EntitySet` is the typed collection a unit of work exposes for one kind of
entity. Writes (`add`, `update`, `remove`) are only *staged* on the set; they
reach the store when the owning unit of work commits. Reads (`get`, `find`,
`count`) always see committed state, so staged changes are invisible even to
the context that staged them.

Ordering: `find` returns rows in insertion order, using an explicit sequence
number assigned at commit time rather than physical storage order.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

E = TypeVar("E")


class ChangeKind(str, Enum):
    """The kind of a staged change."""

    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class StagedChange(Generic[E]):
    """A write waiting for the next commit."""

    kind: ChangeKind
    entity: E


class EntitySet(abc.ABC, Generic[E]):
    """Typed collection of entities with staged writes and committed reads."""

    KIND: ClassVar[str]  # e.g. "author"
    KEY_ATTR: ClassVar[str] = "id"

    def __init__(self) -> None:
        self._staged: list[StagedChange[E]] = []

    # --- staging ---

    def add(self, entity: E) -> None:
        """Stage `entity` for insertion."""
        self._staged.append(StagedChange(ChangeKind.ADDED, entity))

    def update(self, entity: E) -> None:
        """Stage `entity` to overwrite the stored row with the same key."""
        self._staged.append(StagedChange(ChangeKind.MODIFIED, entity))

    def remove(self, entity: E) -> None:
        """Stage removal of the stored row with the same key as `entity`."""
        self._staged.append(StagedChange(ChangeKind.REMOVED, entity))

    @property
    def staged(self) -> tuple[StagedChange[E], ...]:
        """Changes staged since the last commit or rollback, in call order."""
        return tuple(self._staged)

    def discard_staged(self) -> None:
        """Forget every staged change."""
        self._staged.clear()

    def key_of(self, entity: E) -> Any:
        """Return the key of `entity`."""
        return getattr(entity, self.KEY_ATTR)

    # --- committed reads ---

    @abc.abstractmethod
    def get(self, key: Any) -> E | None:
        """Get a committed entity by its key.

        Args:
            key: The entity key.

        Returns:
            A fresh copy of the entity if found, otherwise None.
        """

    @abc.abstractmethod
    def find(
        self,
        where: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[E]:
        """List committed entities in insertion order.

        Args:
            where: Optional attribute → value equality filters.
            offset: Number of matching rows to skip.
            limit: Maximum number of rows to return; None for no limit.

        Returns:
            Fresh copies of the matching entities.
        """

    @abc.abstractmethod
    def count(self, where: Mapping[str, Any] | None = None) -> int:
        """Count committed entities matching `where`."""
