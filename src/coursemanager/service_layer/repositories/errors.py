"""Repository-related error definitions.

Invalid-argument errors also derive from `ValueError`, so callers that only
care about "the caller passed something malformed" can catch that instead.
"""


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class InvalidArgumentError(RepositoryError, ValueError):
    """Raised when a repository operation receives a structurally invalid argument."""


class InvalidIdentifierError(InvalidArgumentError):
    """Raised when an identifier is missing, empty, or the nil UUID.

    This is distinct from "no such record", which repositories report as
    ``None``.
    """

    name: str

    def __init__(self, name: str, value: object):
        super().__init__(f"{name} must be a non-empty identifier, got {value!r}.")
        self.name = name
        self.value = value


class InvalidPagingError(InvalidArgumentError):
    """Raised when a page number or page size is below 1."""

    def __init__(self, page_number: int, page_size: int):
        super().__init__(
            "page_number and page_size must both be >= 1, "
            f"got page_number={page_number}, page_size={page_size}."
        )
        self.page_number = page_number
        self.page_size = page_size
