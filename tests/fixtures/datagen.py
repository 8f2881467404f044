"""Fixtures for generating test data.

The seeded catalog holds two countries (BE, US) and five authors, committed in
this order: Dockx, Cleeren, Lerman, Wildermuth, Kurata.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest

from coursemanager.adapters.id_generators import SimpleIdGenerator
from coursemanager.domain import Author, Country, Course

if TYPE_CHECKING:
    from coursemanager.interfaces.unit_of_work import AbstractUnitOfWork

# pylint: disable=redefined-outer-name

SEED_COUNTRIES = [
    ("BE", "Belgium"),
    ("US", "United States of America"),
]

SEED_AUTHORS = [
    ("Kevin", "Dockx", "BE"),
    ("Gill", "Cleeren", "BE"),
    ("Julie", "Lerman", "US"),
    ("Shawn", "Wildermuth", "US"),
    ("Deborah", "Kurata", "US"),
]


def seed_catalog(uow: AbstractUnitOfWork) -> list[Author]:
    """Commit the seed countries and authors through `uow`.

    Authors get sequential IDs (``UUID(int=1)`` .. ``UUID(int=5)``).

    Returns:
        The seeded authors, in insertion order.
    """
    ids = SimpleIdGenerator()
    for code, description in SEED_COUNTRIES:
        uow.countries.add(Country(id=code, description=description))
    authors = [
        Author(id=ids.new_id(), first_name=first, last_name=last, country_id=country)
        for first, last, country in SEED_AUTHORS
    ]
    for author in authors:
        uow.authors.add(author)
    uow.commit()
    return authors


@pytest.fixture
def seeded(uow_builder) -> list[Author]:
    """Seed the builder's store (in its own unit of work) and return the authors."""
    with uow_builder.build() as uow:
        return seed_catalog(uow)


@pytest.fixture
def make_author() -> Callable[..., Author]:
    """Factory for authors with sensible defaults.

    Args (defaults):
        - last_name: "Doe"
        - first_name: "Jane"
        - country_id: None (the repository assigns the default country)
        - id: None (the repository assigns one)
    """

    def _make_author(**overrides: Any) -> Author:
        base: dict[str, Any] = {"last_name": "Doe", "first_name": "Jane"}
        base.update(overrides)
        return Author(**base)

    return _make_author


@pytest.fixture
def make_course() -> Callable[..., Course]:
    """Factory for courses with sensible defaults (title "Intro", no description)."""

    def _make_course(**overrides: Any) -> Course:
        base: dict[str, Any] = {"title": "Intro"}
        base.update(overrides)
        return Course(**base)

    return _make_course
