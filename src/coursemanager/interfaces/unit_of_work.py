"""Unit of Work interface for CourseManager.

Defines the AbstractUnitOfWork contract: a context-managed persistence
context exposing the catalog's entity sets and abstract commit/rollback
methods. Commit applies every staged change atomically.
"""

from __future__ import annotations

import abc
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from .entity_set import ChangeKind, EntitySet, StagedChange

if TYPE_CHECKING:
    from coursemanager.domain import Author, Country, Course


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    countries: EntitySet[Country]
    authors: EntitySet[Author]
    courses: EntitySet[Course]

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @property
    def entity_sets(self) -> tuple[EntitySet[Any], ...]:
        """The entity sets, referenced tables first."""
        return (self.countries, self.authors, self.courses)

    def has_changes(self) -> bool:
        """Return True if any entity set has staged changes."""
        return any(entity_set.staged for entity_set in self.entity_sets)

    def iter_changes(self) -> Iterator[tuple[EntitySet[Any], StagedChange[Any]]]:
        """Yield staged changes in the order they must be applied.

        Insertions and updates come parents first (countries, authors, courses);
        removals come children first so referenced rows are removed last.
        """
        for kind in (ChangeKind.ADDED, ChangeKind.MODIFIED):
            for entity_set in self.entity_sets:
                for change in entity_set.staged:
                    if change.kind is kind:
                        yield entity_set, change
        for entity_set in reversed(self.entity_sets):
            for change in entity_set.staged:
                if change.kind is ChangeKind.REMOVED:
                    yield entity_set, change

    def discard_staged(self) -> None:
        """Forget staged changes on every entity set."""
        for entity_set in self.entity_sets:
            entity_set.discard_staged()

    @abc.abstractmethod
    def commit(self):
        """Persist staged changes atomically and finalize the transaction.

        Raises:
            PersistenceError: If the store rejects the write. Nothing from
                the batch is persisted in that case.
        """

    @abc.abstractmethod
    def rollback(self):
        """Discard staged changes and clean up transactional resources."""
