"""Functional tests for the ``coursemanager db`` subcommands.

Runs the CLI the way a user would (via ``click.testing.CliRunner``) against a
temporary SQLite file: missing URL guidance, the upgrade prompt, applying the
migration, and reporting the current revision.
"""

import pytest

from coursemanager.entrypoints.cli.db import UPGRADE_SCHEMA_WARNING
from coursemanager.entrypoints.cli.helpers.session import (
    INVALID_URL_FORMAT_MSG,
    MISSING_DB_URL_MSG,
)
from coursemanager.entrypoints.cli.main import coursemanager as coursemanager_cli

# pylint: disable=magic-value-comparison

HEAD_REVISION = "3f1c9a7e2b54"


@pytest.mark.parametrize("cmd", [["db", "current"], ["db", "upgrade"]])
def test_db_no_url(no_url_runner, cmd):
    """db commands error with guidance when COURSEMANAGER_DB_URL is not set."""
    result = no_url_runner.invoke(coursemanager_cli, cmd)

    assert result.exit_code == 1
    assert MISSING_DB_URL_MSG in result.output


def test_db_invalid_url(runner):
    """A value that is not a SQLAlchemy URL is reported as such."""
    result = runner.invoke(
        coursemanager_cli, ["db", "current"], env={"COURSEMANAGER_DB_URL": "not a url"}
    )

    assert result.exit_code == 1
    assert INVALID_URL_FORMAT_MSG in result.output


def test_new_user_initial_db_setup(runner):
    """A new user checks the revision, declines the prompt, then upgrades."""
    # Fresh database: no revision yet.
    result = runner.invoke(coursemanager_cli, ["db", "current"])
    assert result.exit_code == 0, result.output
    assert HEAD_REVISION not in result.output

    # The upgrade asks for confirmation; the user declines.
    result = runner.invoke(coursemanager_cli, ["db", "upgrade"], input="n\n")
    assert result.exit_code == 1, result.output
    assert UPGRADE_SCHEMA_WARNING in result.output
    assert "Are you sure you want to proceed?" in result.output

    result = runner.invoke(coursemanager_cli, ["db", "current"])
    assert HEAD_REVISION not in result.output

    # The user confirms this time.
    result = runner.invoke(coursemanager_cli, ["db", "upgrade"], input="y\n")
    assert result.exit_code == 0, result.output
    assert "Upgrade complete!" in result.output

    result = runner.invoke(coursemanager_cli, ["db", "current"])
    assert result.exit_code == 0, result.output
    assert HEAD_REVISION in result.output


def test_upgrade_sql_dry_run(runner):
    """--sql prints the DDL without prompting or touching the database."""
    result = runner.invoke(coursemanager_cli, ["db", "upgrade", "--sql"])

    assert result.exit_code == 0, result.output
    assert "CREATE TABLE countries" in result.output
    assert "Are you sure" not in result.output

    result = runner.invoke(coursemanager_cli, ["db", "current"])
    assert HEAD_REVISION not in result.output
