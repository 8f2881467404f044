"""In-memory persistence backend."""

from .database import InMemoryDatabase
from .entity_sets import (
    InMemoryAuthorSet,
    InMemoryCountrySet,
    InMemoryCourseSet,
    InMemoryEntitySet,
)
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryAuthorSet",
    "InMemoryCountrySet",
    "InMemoryCourseSet",
    "InMemoryDatabase",
    "InMemoryEntitySet",
    "InMemoryUnitOfWork",
]
