"""Bootstrap the repositories over a unit of work."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from coursemanager import config
from coursemanager.adapters.db.engine import make_engine
from coursemanager.adapters.sqlalchemy_adapters import SqlAlchemyUnitOfWork
from coursemanager.interfaces.unit_of_work import AbstractUnitOfWork
from coursemanager.service_layer.repositories import (
    AuthorRepository,
    CountryRepository,
    CourseRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the application wiring.

    The repositories share `uow`; callers enter it (``with app.uow:``) before
    using them, and call `close()` when done with the container.
    """

    uow: AbstractUnitOfWork
    authors: AuthorRepository
    countries: CountryRepository
    courses: CourseRepository
    engine: Engine | None = None

    def close(self) -> None:
        """Dispose the engine the container owns, if any."""
        if self.engine is not None:
            self.engine.dispose()


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work for write operations."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_repositories(
    uow: AbstractUnitOfWork, engine: Engine | None = None
) -> AppContainer:
    """Build the repositories over a shared unit of work."""
    return AppContainer(
        uow=uow,
        engine=engine,
        authors=AuthorRepository(uow),
        countries=CountryRepository(uow),
        courses=CourseRepository(uow),
    )


def bootstrap(url: str | None = None) -> AppContainer:
    """Bootstrap the repositories against the configured database.

    Args:
        url: Database URL; defaults to `config.get_db_url()`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    engine = make_engine(url if url is not None else config.get_db_url())
    return build_repositories(SqlAlchemyUnitOfWork(engine), engine=engine)
