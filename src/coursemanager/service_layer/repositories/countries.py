"""Country repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import InvalidArgumentError
from .guards import require_code

if TYPE_CHECKING:
    from coursemanager.domain import Country
    from coursemanager.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class CountryRepository:
    """Query and command access to countries."""

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    def get_countries(self) -> list[Country]:
        """Return every country in insertion order."""
        return self.uow.countries.find()

    def get_country(self, country_id: str) -> Country | None:
        """Get a country by its code.

        Raises:
            InvalidIdentifierError: If `country_id` is None or blank.
        """
        return self.uow.countries.get(require_code("country_id", country_id))

    def add_country(self, country: Country) -> None:
        """Stage a new country for insertion.

        Raises:
            InvalidArgumentError: If `country` is None.
            InvalidIdentifierError: If the country code is None or blank.
        """
        if country is None:
            raise InvalidArgumentError("country must not be None.")
        require_code("country.id", country.id)
        self.uow.countries.add(country)
        logger.debug("Staged country %s for insertion", country.id)

    def save_changes(self) -> None:
        """Commit every staged change atomically."""
        self.uow.commit()
