"""Tests for the persistence error hierarchy."""

import pytest

from coursemanager.interfaces.errors import (
    ConcurrencyError,
    ConstraintViolationError,
    DuplicateKeyError,
    ForeignKeyViolationError,
    PersistenceError,
    RequiredValueMissingError,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "error_class",
    [ForeignKeyViolationError, DuplicateKeyError, RequiredValueMissingError],
)
def test_constraint_violations(error_class):
    """Constraint errors keep kind, key and reason and share one base."""
    error = error_class("author", "42", "bad")

    assert isinstance(error, ConstraintViolationError)
    assert isinstance(error, PersistenceError)
    assert (error.kind, error.key, error.reason) == ("author", "42", "bad")
    assert str(error) == "author (42) rejected: bad"


def test_concurrency_error():
    """ConcurrencyError names the entity that matched no row."""
    error = ConcurrencyError("course", "7")

    assert isinstance(error, PersistenceError)
    assert not isinstance(error, ConstraintViolationError)
    assert (error.kind, error.key) == ("course", "7")
    assert "affected 0" in str(error)
