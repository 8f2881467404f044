"""Opening the repositories for a single CLI command.

`open_repositories` resolves the database URL, bootstraps the repositories,
enters their unit of work, and turns library errors into one-line
`click.ClickException`s so commands only deal with the happy path.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click
from sqlalchemy.exc import ArgumentError, OperationalError

from coursemanager import config
from coursemanager.bootstrap import AppContainer, bootstrap
from coursemanager.interfaces.errors import PersistenceError
from coursemanager.service_layer.repositories import InvalidArgumentError

MISSING_DB_URL_MSG = (
    f"{config.DB_URL_ENV_VAR} is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    f"  export {config.DB_URL_ENV_VAR}='sqlite+pysqlite:///courses.db'\n"
    "  or in PowerShell:\n"
    f"  $env:{config.DB_URL_ENV_VAR}='sqlite+pysqlite:///courses.db'"
)

INVALID_URL_FORMAT_MSG = (
    f"The value of {config.DB_URL_ENV_VAR} is not a valid SQLAlchemy database URL."
)

DATABASE_UNUSABLE_MSG = (
    "The database could not be queried. Is it reachable, and is its schema "
    "current? Run 'coursemanager db upgrade' to create or update the schema."
)


def require_db_url() -> str:
    """Return the configured database URL.

    Raises:
        click.ClickException: If `COURSEMANAGER_DB_URL` is not set.
    """
    try:
        return config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e


@contextmanager
def open_repositories() -> Iterator[AppContainer]:
    """Yield the wired repositories inside an open unit of work.

    Anything not saved with ``save_changes()`` is discarded on exit, and the
    engine is disposed.

    Raises:
        click.ClickException: For a missing or invalid URL, an unusable
            database, an invalid argument, or a rejected write.
    """
    url = require_db_url()
    try:
        app = bootstrap(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    try:
        with app.uow:
            yield app
    except (InvalidArgumentError, PersistenceError) as e:
        raise click.ClickException(str(e)) from e
    except OperationalError as e:
        raise click.ClickException(DATABASE_UNUSABLE_MSG) from e
    finally:
        app.close()
