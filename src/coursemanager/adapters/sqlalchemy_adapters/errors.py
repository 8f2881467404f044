"""Translation of SQLAlchemy/DBAPI errors into the persistence hierarchy.

Drivers report constraint failures as `IntegrityError` with a backend-specific
message (e.g. SQLite's ``FOREIGN KEY constraint failed`` or Postgres's
``violates foreign key constraint``). The message is the only portable signal,
so classification is done on its lowercased text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coursemanager.interfaces.errors import (
    ConstraintViolationError,
    DuplicateKeyError,
    ForeignKeyViolationError,
    RequiredValueMissingError,
)

if TYPE_CHECKING:
    from sqlalchemy.exc import IntegrityError

FOREIGN_KEY_MARKERS = ("foreign key",)
NOT_NULL_MARKERS = ("not null", "not-null")
UNIQUE_MARKERS = ("unique", "duplicate key")


def translate_integrity_error(
    exc: IntegrityError, kind: str, key: str
) -> ConstraintViolationError:
    """Map an `IntegrityError` to the matching `ConstraintViolationError`.

    Args:
        exc: The error raised while executing a statement.
        kind: Entity kind the statement was writing (e.g. "author").
        key: Key of the entity being written.

    Returns:
        The most specific `ConstraintViolationError` subclass for the failure.
    """
    reason = str(exc.orig)
    message = reason.lower()
    if any(marker in message for marker in FOREIGN_KEY_MARKERS):
        return ForeignKeyViolationError(kind, key, reason)
    if any(marker in message for marker in NOT_NULL_MARKERS):
        return RequiredValueMissingError(kind, key, reason)
    if any(marker in message for marker in UNIQUE_MARKERS):
        return DuplicateKeyError(kind, key, reason)
    return ConstraintViolationError(kind, key, reason)
