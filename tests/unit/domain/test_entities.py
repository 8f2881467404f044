"""Unit tests for the domain entities."""

import uuid

import pytest

from coursemanager.domain import Author, Country, Course

# pylint: disable=magic-value-comparison


def test_author_defaults():
    """Only the last name is needed to build an author."""
    author = Author(last_name="Lerman")

    assert author.first_name is None
    assert author.country_id is None
    assert author.id is None


def test_entities_compare_by_value():
    """Two entities with equal fields are equal."""
    key = uuid.uuid4()

    assert Author(id=key, last_name="X", country_id="BE") == Author(
        id=key, last_name="X", country_id="BE"
    )
    assert Country(id="BE", description="Belgium") != Country(id="BE", description="België")


def test_course_defaults():
    """A course needs only a title."""
    course = Course(title="Intro")

    assert (course.description, course.author_id, course.id) == (None, None, None)


def test_keyword_only():
    """Entities are built with keywords only."""
    with pytest.raises(TypeError):
        Country("BE", "Belgium")  # pylint: disable=too-many-function-args
