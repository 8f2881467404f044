"""Catalog entities.

Plain, mutable records. Identity is carried by ``id``; for authors and courses
it is a ``uuid.UUID`` that stays ``None`` until a repository assigns one.

Conventions:
  - `Country.id` is a short code (e.g. "BE", "US").
  - `Author.country_id` references `Country.id`.
  - `Course.author_id` references `Author.id`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(slots=True, kw_only=True)
class Country:
    """A country an author can be attached to."""

    id: str
    description: str


@dataclass(slots=True, kw_only=True)
class Author:
    """A course author."""

    last_name: str
    first_name: str | None = None
    country_id: str | None = None
    id: uuid.UUID | None = None


@dataclass(slots=True, kw_only=True)
class Course:
    """A course written by an author."""

    title: str
    description: str | None = None
    author_id: uuid.UUID | None = None
    id: uuid.UUID | None = None
