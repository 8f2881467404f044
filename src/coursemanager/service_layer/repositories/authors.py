"""Author repository.

Mediates every read and write of `Author` data over a unit of work and
enforces the policy the storage layer does not:

- identifiers must be well-formed (a nil UUID is a caller error, not a miss),
- pages are 1-based and ordered by insertion,
- an author added without a country is attached to `DEFAULT_COUNTRY_ID`.

Writes are only staged; nothing reaches the store until `save_changes()`.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from coursemanager.adapters.id_generators import UUIDv4Generator

from .errors import InvalidArgumentError
from .guards import is_unset_uuid, page_bounds, require_uuid

if TYPE_CHECKING:
    from coursemanager.domain import Author
    from coursemanager.interfaces.id_generator import IdGenerator
    from coursemanager.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_ID = "BE"


class AuthorRepository:
    """Query and command access to authors."""

    def __init__(
        self, uow: AbstractUnitOfWork, id_generator: IdGenerator | None = None
    ) -> None:
        self.uow = uow
        self.id_generator = id_generator if id_generator is not None else UUIDv4Generator()

    # --- Queries ---

    def get_authors(self, page_number: int, page_size: int) -> list[Author]:
        """Return one page of authors in insertion order.

        Args:
            page_number: 1-based page index.
            page_size: Maximum number of authors per page.

        Returns:
            The authors on the requested page; an empty list when the page
            lies past the last author.

        Raises:
            InvalidPagingError: If `page_number` or `page_size` is below 1.
        """
        offset, limit = page_bounds(page_number, page_size)
        return self.uow.authors.find(offset=offset, limit=limit)

    def get_all_authors(self) -> list[Author]:
        """Return every author in insertion order."""
        return self.uow.authors.find()

    def get_author(self, author_id: uuid.UUID) -> Author | None:
        """Get an author by ID.

        Args:
            author_id: The author's identifier.

        Returns:
            The author if found, otherwise None.

        Raises:
            InvalidIdentifierError: If `author_id` is None or the nil UUID.
        """
        return self.uow.authors.get(require_uuid("author_id", author_id))

    def author_exists(self, author_id: uuid.UUID) -> bool:
        """Return True if an author with `author_id` is stored.

        Raises:
            InvalidIdentifierError: If `author_id` is None or the nil UUID.
        """
        key = require_uuid("author_id", author_id)
        return self.uow.authors.count(where={"id": key}) > 0

    # --- Commands ---

    def add_author(self, author: Author) -> None:
        """Stage a new author for insertion.

        Assigns an ID when the author has none (or the nil UUID), and
        `DEFAULT_COUNTRY_ID` when its country is unset or empty. Both
        assignments happen on the given instance.

        Raises:
            InvalidArgumentError: If `author` is None.
        """
        if author is None:
            raise InvalidArgumentError("author must not be None.")
        if is_unset_uuid(author.id):
            author.id = self.id_generator.new_id()
        if not author.country_id:
            author.country_id = DEFAULT_COUNTRY_ID
        self.uow.authors.add(author)
        logger.debug("Staged author %s for insertion", author.id)

    def update_author(self, author: Author) -> None:
        """Stage an update of a stored author.

        Raises:
            InvalidArgumentError: If `author` is None.
            InvalidIdentifierError: If the author has no valid ID.
        """
        if author is None:
            raise InvalidArgumentError("author must not be None.")
        require_uuid("author.id", author.id)
        self.uow.authors.update(author)
        logger.debug("Staged author %s for update", author.id)

    def delete_author(self, author: Author) -> None:
        """Stage removal of an author; their courses go with them.

        Raises:
            InvalidArgumentError: If `author` is None.
            InvalidIdentifierError: If the author has no valid ID.
        """
        if author is None:
            raise InvalidArgumentError("author must not be None.")
        require_uuid("author.id", author.id)
        self.uow.authors.remove(author)
        logger.debug("Staged author %s for removal", author.id)

    def save_changes(self) -> None:
        """Commit every staged change atomically.

        Raises:
            PersistenceError: If the store rejects the write.
        """
        self.uow.commit()
