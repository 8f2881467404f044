"""Catalog schema.

Defines the ``countries``, ``authors`` and ``courses`` tables. Column names
match the attribute names of the domain entities one-to-one, plus a ``seq``
column holding the explicit insertion sequence used for ordering.

Constraints (enforced here):

| Constraint                              | Purpose                          |
|-----------------------------------------|----------------------------------|
| authors.country_id → countries.id       | author must belong to a country  |
| courses.author_id → authors.id CASCADE  | courses are removed with author  |
| UNIQUE(seq) per table                   | stable, total insertion order    |

The in-memory backend mirrors these constraints; keep both in step.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Uuid

from .metadata import metadata

__all__ = ["countries", "authors", "courses", "SEQ_COLUMN"]

SEQ_COLUMN = "seq"

countries = Table(
    "countries",
    metadata,
    Column("id", String(2), primary_key=True, comment="Country code, e.g. 'BE'."),
    Column(
        SEQ_COLUMN, Integer, nullable=False, unique=True, comment="Insertion order."
    ),
    Column("description", String(250), nullable=False),
    comment="Countries authors can be attached to.",
)

authors = Table(
    "authors",
    metadata,
    Column("id", Uuid(), primary_key=True),
    Column(
        SEQ_COLUMN, Integer, nullable=False, unique=True, comment="Insertion order."
    ),
    Column("first_name", String(50), nullable=True),
    Column("last_name", String(50), nullable=False),
    Column(
        "country_id",
        String(2),
        ForeignKey("countries.id"),
        nullable=False,
        comment="Defaults to 'BE' at the repository level.",
    ),
    comment="Course authors.",
)

courses = Table(
    "courses",
    metadata,
    Column("id", Uuid(), primary_key=True),
    Column(
        SEQ_COLUMN, Integer, nullable=False, unique=True, comment="Insertion order."
    ),
    Column("title", String(200), nullable=False),
    Column("description", String(1500), nullable=True),
    Column(
        "author_id",
        Uuid(),
        ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    comment="Courses, each written by one author.",
)
