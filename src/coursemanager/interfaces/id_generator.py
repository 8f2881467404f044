"""Interface for ID generators."""

import abc
import uuid

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for an entity ID generator."""

    @abc.abstractmethod
    def new_id(self) -> uuid.UUID:
        """Generate a new unique identifier."""
