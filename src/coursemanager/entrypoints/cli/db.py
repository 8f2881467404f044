"""CourseManager DB CLI: Alembic wrappers.

Behavior
- Uses programmatic Alembic configuration; human-oriented notices go to
  **stderr**, Alembic output to **stdout**.
- ``upgrade`` prompts for confirmation unless ``--force`` or ``--sql`` is given.

Requirements
- ``COURSEMANAGER_DB_URL`` must be set.

Failure modes
- Missing/invalid ``COURSEMANAGER_DB_URL`` or unreachable DB → ``ClickException``
  with guidance.
"""

from __future__ import annotations

import sys

import click
import click_extra as clickx
from alembic import command
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from coursemanager import config
from coursemanager.adapters.db.engine import make_engine

from .helpers import require_db_url, sanitize_url, success, warn
from .helpers.session import INVALID_URL_FORMAT_MSG

CANNOT_CONNECT_MSG = (
    f"{config.DB_URL_ENV_VAR} is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)


def _check_connection(url: str) -> None:
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    finally:
        engine.dispose()


def _get_url() -> str:
    url = require_db_url()
    try:
        _check_connection(url)
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    return url


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    help="Show alembic's more verbose output.",
)
def current(verbose: bool) -> None:
    """Show current DB revision."""
    url = _get_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = _get_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")
