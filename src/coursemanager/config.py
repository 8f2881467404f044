"""Configuration utilities for CourseManager.

This module centralizes small helpers and constants related to application configuration.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "COURSEMANAGER_DB_URL"

ALEMBIC_URL_KEY = "sqlalchemy.url"
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"


class DatabaseUrlNotSetError(Exception):
    """Raised when the COURSEMANAGER_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `COURSEMANAGER_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `COURSEMANAGER_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for CourseManager's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → the packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///courses.db`). Can be
            `None` (default) only in contexts where Alembic won't need to
            connect to the DB.
        stdout: Text stream Alembic will write status lines to. Defaults to
            `sys.stdout`; override in tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to the migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("coursemanager.adapters.db.alembic")),
    )
    return cfg
