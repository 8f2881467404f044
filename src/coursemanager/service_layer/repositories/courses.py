"""Course repository.

Courses are always addressed through their author: a course that exists but
belongs to someone else is reported as missing.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from coursemanager.adapters.id_generators import UUIDv4Generator

from .errors import InvalidArgumentError
from .guards import is_unset_uuid, require_uuid

if TYPE_CHECKING:
    from coursemanager.domain import Course
    from coursemanager.interfaces.id_generator import IdGenerator
    from coursemanager.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class CourseRepository:
    """Query and command access to courses."""

    def __init__(
        self, uow: AbstractUnitOfWork, id_generator: IdGenerator | None = None
    ) -> None:
        self.uow = uow
        self.id_generator = id_generator if id_generator is not None else UUIDv4Generator()

    def get_courses(self, author_id: uuid.UUID) -> list[Course]:
        """Return the author's courses in insertion order.

        Raises:
            InvalidIdentifierError: If `author_id` is None or the nil UUID.
        """
        key = require_uuid("author_id", author_id)
        return self.uow.courses.find(where={"author_id": key})

    def get_course(self, author_id: uuid.UUID, course_id: uuid.UUID) -> Course | None:
        """Get one of the author's courses.

        Returns:
            The course, or None if it does not exist or belongs to another author.

        Raises:
            InvalidIdentifierError: If either identifier is None or the nil UUID.
        """
        author_key = require_uuid("author_id", author_id)
        course = self.uow.courses.get(require_uuid("course_id", course_id))
        if course is None or course.author_id != author_key:
            return None
        return course

    def add_course(self, author_id: uuid.UUID, course: Course) -> None:
        """Stage a new course for the given author.

        Assigns an ID when the course has none (or the nil UUID) and sets its
        `author_id`.

        Raises:
            InvalidArgumentError: If `course` is None.
            InvalidIdentifierError: If `author_id` is None or the nil UUID.
        """
        key = require_uuid("author_id", author_id)
        if course is None:
            raise InvalidArgumentError("course must not be None.")
        if is_unset_uuid(course.id):
            course.id = self.id_generator.new_id()
        course.author_id = key
        self.uow.courses.add(course)
        logger.debug("Staged course %s for author %s", course.id, key)

    def delete_course(self, course: Course) -> None:
        """Stage removal of a course.

        Raises:
            InvalidArgumentError: If `course` is None.
            InvalidIdentifierError: If the course has no valid ID.
        """
        if course is None:
            raise InvalidArgumentError("course must not be None.")
        require_uuid("course.id", course.id)
        self.uow.courses.remove(course)
        logger.debug("Staged course %s for removal", course.id)

    def save_changes(self) -> None:
        """Commit every staged change atomically."""
        self.uow.commit()
