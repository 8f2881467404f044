"""CourseManager CLI entry point.

Defines the top-level ``coursemanager`` command (via Click-Extra) and
registers its subcommand groups:

- ``coursemanager db``: schema management (upgrade/current).
- ``coursemanager countries``: list/add countries.
- ``coursemanager authors``: list/show/add authors.
- ``coursemanager courses``: list/add an author's courses.

The version is sourced from `coursemanager.__version__` and displayed by
Click-Extra (``--version``).

Examples
    $ coursemanager --version
    $ coursemanager db upgrade --force
    $ coursemanager authors list --page 2 --size 3
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from coursemanager import __version__
from coursemanager.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .authors import authors as authors_group
from .countries import countries as countries_group
from .courses import courses as courses_group
from .db import db as db_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """CourseManager command-line interface.

    Manage a small catalog of countries, authors and their courses stored in
    the database named by COURSEMANAGER_DB_URL.
    """

SQLALCHEMY_URL_DOCS = "https://docs.sqlalchemy.org/en/20/core/engines.html#database-urls"

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Database URLs: " + hyperlink(SQLALCHEMY_URL_DOCS),
    ]
)


def _default_log_path() -> Path:
    return Path(user_log_dir("coursemanager", appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    help="Enable debug mode (developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight recorder's log file.",
    default=_default_log_path,
    envvar="COURSEMANAGER_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    help=(
        "Keep the last log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING or ERROR occurs."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def coursemanager(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CourseManager command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(config_flight_recorder(path=log_path))

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


coursemanager.add_command(db_group)
coursemanager.add_command(countries_group)
coursemanager.add_command(authors_group)
coursemanager.add_command(courses_group)
