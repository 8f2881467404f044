"""Contract tests for units of work built by every backend builder.

Covers the commit semantics callers rely on: staged changes are invisible
until commit, commits are all-or-nothing, and both backends reject the same
writes with the same error types.
"""

from __future__ import annotations

import uuid

import pytest

from coursemanager.domain import Author, Country, Course
from coursemanager.interfaces.errors import (
    ConcurrencyError,
    ConstraintViolationError,
    DuplicateKeyError,
    ForeignKeyViolationError,
    PersistenceError,
    RequiredValueMissingError,
)
from coursemanager.service_layer.repositories import AuthorRepository

# pylint: disable=magic-value-comparison,unused-argument


def _author(n: int, **overrides) -> Author:
    fields = {"id": uuid.UUID(int=n), "last_name": f"Author {n}", "country_id": "BE"}
    fields.update(overrides)
    return Author(**fields)


def test_staged_changes_are_invisible_before_commit(uow_builder, seeded):
    """Neither the staging context nor another context sees staged rows."""
    with uow_builder.build() as uow:
        uow.authors.add(_author(100))

        assert uow.authors.get(uuid.UUID(int=100)) is None
        assert uow.authors.count() == len(seeded)
        assert uow.has_changes()

        with uow_builder.build() as other:
            assert other.authors.get(uuid.UUID(int=100)) is None


def test_commit_makes_changes_visible_to_new_contexts(uow_builder, seeded):
    """Committed rows are visible to every later context."""
    with uow_builder.build() as uow:
        uow.authors.add(_author(100))
        uow.commit()
        assert not uow.has_changes()

    with uow_builder.build() as uow:
        assert uow.authors.get(uuid.UUID(int=100)) == _author(100)


def test_rollback_discards_staged_changes(uow_builder, seeded):
    """rollback() forgets staged changes; a later commit writes nothing."""
    with uow_builder.build() as uow:
        uow.authors.add(_author(100))
        uow.rollback()
        assert not uow.has_changes()
        uow.commit()

    with uow_builder.build() as uow:
        assert uow.authors.count() == len(seeded)


def test_leaving_context_discards_uncommitted_changes(uow_builder, seeded):
    """Exiting the with-block without commit leaves the store unchanged."""
    with uow_builder.build() as uow:
        uow.authors.add(_author(100))

    with uow_builder.build() as uow:
        assert uow.authors.get(uuid.UUID(int=100)) is None


def test_exception_inside_context_discards_changes(uow_builder, seeded):
    """An exception inside the with-block rolls back and propagates."""

    class MyException(Exception):
        """Custom exception for testing."""

    with pytest.raises(MyException):
        with uow_builder.build() as uow:
            uow.authors.add(_author(100))
            raise MyException()

    with uow_builder.build() as uow:
        assert uow.authors.get(uuid.UUID(int=100)) is None


def test_failed_commit_is_atomic(uow_builder, seeded):
    """When one change is rejected, none of the batch is stored."""
    with uow_builder.build() as uow:
        uow.countries.add(Country(id="NL", description="Netherlands"))
        uow.authors.add(_author(100))
        uow.authors.add(_author(101, country_id="XX"))
        with pytest.raises(ForeignKeyViolationError):
            uow.commit()

    with uow_builder.build() as uow:
        assert uow.countries.get("NL") is None
        assert uow.authors.get(uuid.UUID(int=100)) is None
        assert uow.authors.count() == len(seeded)


def test_failed_commit_keeps_staged_changes_until_rollback(uow_builder, seeded):
    """After a rejected commit, changes stay staged so the caller can decide."""
    with uow_builder.build() as uow:
        uow.authors.add(_author(100, country_id="XX"))
        with pytest.raises(PersistenceError):
            uow.commit()
        assert uow.has_changes()

        uow.rollback()
        assert not uow.has_changes()


def test_next_commit_after_failure_succeeds(uow_builder, seeded):
    """A context stays usable after a rejected commit and a rollback."""
    with uow_builder.build() as uow:
        uow.authors.add(_author(100, country_id="XX"))
        with pytest.raises(ForeignKeyViolationError):
            uow.commit()
        uow.rollback()

        uow.authors.add(_author(101))
        uow.commit()

    with uow_builder.build() as uow:
        assert uow.authors.get(uuid.UUID(int=101)) is not None


def test_parent_and_child_in_one_commit(uow_builder):
    """A country, an author in it and their course can be committed together,
    whatever order they were staged in."""
    with uow_builder.build() as uow:
        uow.courses.add(Course(id=uuid.UUID(int=500), title="T", author_id=uuid.UUID(int=1)))
        uow.authors.add(_author(1, country_id="NL"))
        uow.countries.add(Country(id="NL", description="Netherlands"))
        uow.commit()

    with uow_builder.build() as uow:
        assert uow.courses.get(uuid.UUID(int=500)).author_id == uuid.UUID(int=1)


def test_find_filters_and_orders(uow, seeded):
    """find() filters by attribute equality and keeps insertion order."""
    us_authors = uow.authors.find(where={"country_id": "US"})

    assert [a.last_name for a in us_authors] == ["Lerman", "Wildermuth", "Kurata"]
    assert uow.authors.count(where={"country_id": "BE"}) == 2
    assert [a.last_name for a in uow.authors.find(offset=1, limit=2)] == ["Cleeren", "Lerman"]


def test_duplicate_author_id_is_rejected(uow, seeded):
    """Adding an author whose id already exists violates the key."""
    uow.authors.add(_author(1))

    with pytest.raises(DuplicateKeyError) as excinfo:
        uow.commit()

    assert excinfo.value.kind == "author"
    assert isinstance(excinfo.value, ConstraintViolationError)


def test_missing_last_name_is_rejected(uow, seeded):
    """A required attribute left unset is rejected at commit."""
    uow.authors.add(_author(100, last_name=None))

    with pytest.raises(RequiredValueMissingError):
        uow.commit()


def test_deleting_referenced_country_is_rejected(uow, seeded):
    """A country still referenced by authors cannot be removed."""
    uow.countries.remove(Country(id="US", description="United States of America"))

    with pytest.raises(ForeignKeyViolationError) as excinfo:
        uow.commit()

    assert excinfo.value.kind == "country"
    assert uow.countries.get("US") is not None


def test_deleting_unreferenced_country(uow, seeded):
    """A country without authors can be removed."""
    uow.countries.add(Country(id="NL", description="Netherlands"))
    uow.commit()

    uow.countries.remove(Country(id="NL", description="Netherlands"))
    uow.commit()

    assert uow.countries.get("NL") is None


@pytest.mark.parametrize("staging", ["update", "remove"])
def test_writing_a_missing_row_is_a_concurrency_error(uow, seeded, staging):
    """Updating or removing a row that is not stored affects no row."""
    getattr(uow.authors, staging)(_author(999))

    with pytest.raises(ConcurrencyError) as excinfo:
        uow.commit()

    assert excinfo.value.kind == "author"
    assert excinfo.value.key == str(uuid.UUID(int=999))


def test_non_uuid_author_key_is_rejected(uow_builder, seeded):
    """An author keyed by a string is a rejected write, and the batch is undone."""
    with uow_builder.build() as uow:
        uow.countries.add(Country(id="NL", description="Netherlands"))
        uow.authors.add(_author(100, id="not-a-uuid"))
        with pytest.raises(PersistenceError):
            uow.commit()

    with uow_builder.build() as uow:
        assert uow.countries.get("NL") is None
        assert uow.authors.count() == len(seeded)


def test_unit_can_be_used_without_entering(uow_builder, seeded):
    """Reads and commits work on a unit that was never entered."""
    unit = uow_builder.build()
    repo = AuthorRepository(unit)

    assert [a.last_name for a in repo.get_authors(1, 5)] == [a.last_name for a in seeded]

    unit.authors.add(_author(100))
    unit.commit()
    unit.rollback()

    with uow_builder.build() as uow:
        assert uow.authors.get(uuid.UUID(int=100)) == _author(100)
