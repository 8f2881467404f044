"""Alembic environment for CourseManager.

The database URL is taken from, in order: ``alembic -x url=...``, the
``sqlalchemy.url`` main option set by `config.build_alembic_config`, and
finally ``COURSEMANAGER_DB_URL``. Online migrations connect through
`make_engine`, so SQLite runs them with the same PRAGMAs as the application.
"""

from logging.config import fileConfig

from alembic import context

# Table definitions must be imported for autogenerate to see them
import coursemanager.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from coursemanager.adapters.db.engine import is_sqlite, make_engine
from coursemanager.adapters.db.metadata import metadata
from coursemanager.config import (
    ALEMBIC_URL_KEY,
    DB_URL_ENV_VAR,
    DatabaseUrlNotSetError,
    get_db_url,
)

# pylint: disable=no-member

alembic_cfg = context.config

if alembic_cfg.config_file_name is not None:
    fileConfig(alembic_cfg.config_file_name)


def resolve_url() -> str:
    """Return the URL to migrate."""
    if url := context.get_x_argument(as_dictionary=True).get("url"):
        return url
    if url := alembic_cfg.get_main_option(ALEMBIC_URL_KEY):
        return url
    try:
        return get_db_url()
    except DatabaseUrlNotSetError:
        raise RuntimeError(f"Set {DB_URL_ENV_VAR} to your database URL.") from None


def run_migrations_offline(url: str) -> None:
    """Emit the migration SQL to the script output instead of executing it."""
    context.configure(
        url=url,
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online(url: str) -> None:
    """Run the migrations on a live connection, then dispose the engine."""
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=metadata,
                compare_type=True,
                # SQLite can only ALTER TABLE through table rebuilds
                render_as_batch=is_sqlite(url),
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline(resolve_url())
else:
    run_migrations_online(resolve_url())
