"""``coursemanager authors``: list, show and add authors.

Rows are printed tab-separated as ``ID  FIRST  LAST  COUNTRY`` (a missing
first name prints as ``-``) so the output can be piped.
"""

from __future__ import annotations

import uuid

import click
import click_extra as clickx

from coursemanager.domain import Author

from .helpers import open_repositories, success


def _format_author(author: Author) -> str:
    return "\t".join(
        [str(author.id), author.first_name or "-", author.last_name, str(author.country_id)]
    )


@click.group(cls=clickx.ExtraGroup)
def authors() -> None:
    """Browse and add authors."""


@authors.command("list")
@click.option(
    "--page", "page_number", type=int, default=1, show_default=True, help="1-based page number."
)
@click.option(
    "--size", "page_size", type=int, default=10, show_default=True, help="Authors per page."
)
def list_authors(page_number: int, page_size: int) -> None:
    """List one page of authors in the order they were added."""
    with open_repositories() as app:
        for author in app.authors.get_authors(page_number, page_size):
            click.echo(_format_author(author))


@authors.command("show")
@click.argument("author_id", type=click.UUID)
def show_author(author_id: uuid.UUID) -> None:
    """Show the author with AUTHOR_ID and their courses."""
    with open_repositories() as app:
        if (author := app.authors.get_author(author_id)) is None:
            raise click.ClickException(f"Author {author_id} not found.")
        click.echo(_format_author(author))
        for course in app.courses.get_courses(author_id):
            click.echo(f"  {course.id}\t{course.title}")


@authors.command("add")
@click.argument("last_name")
@click.option("--first", "first_name", help="First name.")
@click.option(
    "--country",
    "country_id",
    help="Country code; the default country (BE) is used when omitted.",
)
def add_author(last_name: str, first_name: str | None, country_id: str | None) -> None:
    """Add an author and print their new ID."""
    author = Author(
        last_name=last_name,
        first_name=first_name,
        country_id=country_id.upper() if country_id else None,
    )
    with open_repositories() as app:
        app.authors.add_author(author)
        app.authors.save_changes()
    click.echo(str(author.id))
    success(f"Author {last_name} added.")
