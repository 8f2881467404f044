"""In-memory shared data store for the in-memory backend."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class StoredRow:
    """A committed entity together with its insertion sequence number."""

    seq: int
    entity: Any


@dataclass(slots=True)
class InMemoryDatabase:
    """Shared in-memory backing store for the in-memory entity sets.

    A single instance is shared by every unit of work built over the same
    store, the way several connections share one database. Each bucket is
    keyed by the entity key and stores a `StoredRow` holding a private copy
    of the entity, so callers never share mutable instances with the store.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded scenarios.
    """

    name: str

    # keyed by country code
    countries: dict[str, StoredRow] = field(default_factory=dict)

    # keyed by author id
    authors: dict[uuid.UUID, StoredRow] = field(default_factory=dict)

    # keyed by course id
    courses: dict[uuid.UUID, StoredRow] = field(default_factory=dict)

    # last sequence number handed out, keyed by bucket name
    last_seq: dict[str, int] = field(default_factory=dict)

    def snapshot(self) -> InMemoryDatabase:
        """Return a working copy whose buckets can be changed independently."""
        return InMemoryDatabase(
            name=self.name,
            countries=dict(self.countries),
            authors=dict(self.authors),
            courses=dict(self.courses),
            last_seq=dict(self.last_seq),
        )

    def restore(self, other: InMemoryDatabase) -> None:
        """Replace this store's contents with those of `other`."""
        self.countries = other.countries
        self.authors = other.authors
        self.courses = other.courses
        self.last_seq = other.last_seq

    def next_seq(self, bucket: str) -> int:
        """Hand out the next insertion sequence number for `bucket`."""
        seq = self.last_seq.get(bucket, 0) + 1
        self.last_seq[bucket] = seq
        return seq
