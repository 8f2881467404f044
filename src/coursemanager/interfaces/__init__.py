"""Ports the repositories depend on: unit of work, entity sets, errors."""

from .entity_set import ChangeKind, EntitySet, StagedChange
from .errors import (
    ConcurrencyError,
    ConstraintViolationError,
    DuplicateKeyError,
    ForeignKeyViolationError,
    PersistenceError,
    RequiredValueMissingError,
)
from .id_generator import IdGenerator
from .unit_of_work import AbstractUnitOfWork

__all__ = [
    "AbstractUnitOfWork",
    "ChangeKind",
    "ConcurrencyError",
    "ConstraintViolationError",
    "DuplicateKeyError",
    "EntitySet",
    "ForeignKeyViolationError",
    "IdGenerator",
    "PersistenceError",
    "RequiredValueMissingError",
    "StagedChange",
]
