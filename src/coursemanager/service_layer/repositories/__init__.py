"""Package for repository implementations."""

from .authors import DEFAULT_COUNTRY_ID, AuthorRepository
from .countries import CountryRepository
from .courses import CourseRepository
from .errors import (
    InvalidArgumentError,
    InvalidIdentifierError,
    InvalidPagingError,
    RepositoryError,
)

__all__ = [
    "DEFAULT_COUNTRY_ID",
    "AuthorRepository",
    "CountryRepository",
    "CourseRepository",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "InvalidPagingError",
    "RepositoryError",
]
