"""Argument guards shared by the repositories."""

from __future__ import annotations

import uuid

from .errors import InvalidIdentifierError, InvalidPagingError

NIL_UUID = uuid.UUID(int=0)


def require_uuid(name: str, value: uuid.UUID | None) -> uuid.UUID:
    """Return `value` if it is a non-nil UUID.

    Raises:
        InvalidIdentifierError: If `value` is None, not a UUID, or the nil UUID.
    """
    if not isinstance(value, uuid.UUID) or value.int == 0:
        raise InvalidIdentifierError(name, value)
    return value


def require_code(name: str, value: str | None) -> str:
    """Return `value` if it is a non-blank string code.

    Raises:
        InvalidIdentifierError: If `value` is None, not a string, or blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidIdentifierError(name, value)
    return value


def page_bounds(page_number: int, page_size: int) -> tuple[int, int]:
    """Translate a 1-based page into an ``(offset, limit)`` pair.

    Raises:
        InvalidPagingError: If either argument is below 1.
    """
    if page_number < 1 or page_size < 1:
        raise InvalidPagingError(page_number, page_size)
    return (page_number - 1) * page_size, page_size


def is_unset_uuid(value: uuid.UUID | None) -> bool:
    """Return True for the values that mean "no identifier yet": None or the nil UUID."""
    return value is None or value == NIL_UUID
