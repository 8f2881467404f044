"""Logging helpers used by the CourseManager CLI, library, and tests.

This module provides utilities for configuring console logging with Rich,
an in-memory "flight recorder" that buffers log records and writes them
to disk on flush, a filter that annotates third-party log records with a
short prefix used by console formatting, and a `CallbackHandler` that
forwards formatted lines to any callable (used to surface SQL from the test
backends in pytest output).
"""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Callable
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "coursemanager"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[sqlalchemy]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach a prefix to the record and allow it through.

        Args:
            record: The LogRecord being processed.

        Returns:
            bool: Always True (record is not filtered out).
        """
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


class CallbackHandler(logging.Handler):
    """Forward each formatted record at or above `level` to a callable.

    The sink can be anything accepting a string: ``print``, a list's
    ``append``, or a test-output writer.

    Args:
        sink: Callable receiving one formatted line per record.
        level: Minimum level forwarded to the sink.
        fmt: Format string for the lines.
    """

    def __init__(
        self,
        sink: Callable[[str], object],
        level: int = logging.INFO,
        fmt: str = "%(levelname)s %(name)s: %(message)s",
    ) -> None:
        super().__init__(level=level)
        self.sink = sink
        self.setFormatter(logging.Formatter(fmt))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink(self.format(record))
        except Exception:  # pylint: disable=broad-except
            self.handleError(record)


CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler the CLI puts on the root logger.

    In debug mode every record down to DEBUG is shown with a timestamp, its
    logger name and a link to the emitting source line, and `level` is
    ignored. Otherwise records below `level` are dropped and records from
    other libraries are tagged with the library's name. `color` follows
    click-extra's ``--color/--no-color``.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Keep the last `capacity` records in memory; dump them to `path` on trouble.

    A record at `flush_level` or above writes the whole buffer to `path`, so
    the log file shows what led up to a warning. The file is only created on
    the first flush, and is overwritten by each CLI run. Whatever is still
    buffered at exit is dropped unless `flush_on_close` is set.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log which CourseManager is running and how its logging is set up.

    One INFO line names the version, the console level and whether the flight
    recorder is on; the runtime and the full logging setup follow at DEBUG,
    where they end up in the flight recorder's file.
    """
    logger.info(
        "CourseManager %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )
    logger.debug(
        "Runtime: Python %s on %s %s, SQLAlchemy %s, Alembic %s (pid %s, cwd %s)",
        platform.python_version(),
        platform.system(),
        platform.release(),
        sqlalchemy.__version__,
        alembic.__version__,
        os.getpid(),
        Path.cwd(),
    )
    logger.debug(
        "Logging: handlers=%s flight-recorder-file=%s levels=%s",
        [type(h).__name__ for h in handlers],
        log_path if flight_recorder else None,
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
