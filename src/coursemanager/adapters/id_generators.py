"""ID generators for CourseManager entities."""

import threading
import uuid

from ulid import monotonic

from coursemanager.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    This is the default generator for new authors and courses.
    """

    def new_id(self) -> uuid.UUID:
        """Generate a new UUID."""
        return uuid.uuid4()


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator, returned as UUIDs.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component. Their 128 bits map one-to-one onto a
    UUID, so they fit the same key columns. Uses the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> uuid.UUID:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return monotonic.new().uuid


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential UUIDs (start+1, start+2, ...).

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = start

    def new_id(self) -> uuid.UUID:
        """Generate a new unique identifier."""
        self._counter += 1
        return uuid.UUID(int=self._counter)
