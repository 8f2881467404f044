"""``coursemanager countries``: list and add countries."""

from __future__ import annotations

import click
import click_extra as clickx

from coursemanager.domain import Country

from .helpers import open_repositories, success


@click.group(cls=clickx.ExtraGroup)
def countries() -> None:
    """Manage the countries authors can belong to."""


@countries.command("list")
def list_countries() -> None:
    """List countries in the order they were added (CODE<TAB>DESCRIPTION)."""
    with open_repositories() as app:
        for country in app.countries.get_countries():
            click.echo(f"{country.id}\t{country.description}")


@countries.command("add")
@click.argument("code")
@click.argument("description")
def add_country(code: str, description: str) -> None:
    """Add a country with the given CODE (e.g. BE) and DESCRIPTION."""
    with open_repositories() as app:
        app.countries.add_country(Country(id=code.upper(), description=description))
        app.countries.save_changes()
    success(f"Country {code.upper()} added.")
