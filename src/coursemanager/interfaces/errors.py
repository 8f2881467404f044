"""Errors raised by persistence backends.

Every backend translates its native failures into this hierarchy so that
callers (and the dual-backend contract tests) can rely on the same exception
types regardless of the storage engine underneath.
"""


class PersistenceError(Exception):
    """Base class for errors raised when a store rejects or cannot take a write."""


class ConstraintViolationError(PersistenceError):
    """Raised when a commit would violate a schema constraint.

    Attributes:
        kind (str): The entity kind involved (e.g. "author").
        key (str): The key of the offending entity, as a string.
        reason (str): A short description of the violated constraint.
    """

    def __init__(self, kind: str, key: str, reason: str) -> None:
        super().__init__(f"{kind} ({key}) rejected: {reason}")
        self.kind = kind
        self.key = key
        self.reason = reason


class ForeignKeyViolationError(ConstraintViolationError):
    """Raised when a row references a missing row, or a referenced row is removed."""


class DuplicateKeyError(ConstraintViolationError):
    """Raised when a row is added with a key that already exists."""


class RequiredValueMissingError(ConstraintViolationError):
    """Raised when a required (NOT NULL) attribute is unset."""


class ConcurrencyError(PersistenceError):
    """Raised when an update or removal targets a row that no longer exists."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(
            f"{kind} ({key}) was expected to affect 1 row but affected 0."
        )
        self.kind = kind
        self.key = key
