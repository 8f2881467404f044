"""SQLAlchemy-backed persistence backend."""

from .entity_sets import (
    SqlAlchemyAuthorSet,
    SqlAlchemyCountrySet,
    SqlAlchemyCourseSet,
    SqlAlchemyEntitySet,
)
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "SqlAlchemyAuthorSet",
    "SqlAlchemyCountrySet",
    "SqlAlchemyCourseSet",
    "SqlAlchemyEntitySet",
    "SqlAlchemyUnitOfWork",
]
