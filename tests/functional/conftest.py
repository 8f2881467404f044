"""Fixtures for the CLI tests under `tests/functional/`."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from coursemanager import config

# pylint: disable=redefined-outer-name


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Flight-recorder file kept inside the test's temp dir."""
    return tmp_path / "logs" / "latest.log"


@pytest.fixture
def runner(sqlite_url_file: str, log_path: Path) -> CliRunner:
    """A CliRunner pointed at a fresh SQLite file (not yet migrated)."""
    return CliRunner(
        env={
            config.DB_URL_ENV_VAR: sqlite_url_file,
            "COURSEMANAGER_LOG_PATH": str(log_path),
        }
    )


@pytest.fixture
def no_url_runner(log_path: Path) -> CliRunner:
    """A CliRunner with COURSEMANAGER_DB_URL unset."""
    return CliRunner(
        env={config.DB_URL_ENV_VAR: "", "COURSEMANAGER_LOG_PATH": str(log_path)}
    )
