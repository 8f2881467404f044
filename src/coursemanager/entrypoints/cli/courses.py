"""``coursemanager courses``: list and add an author's courses."""

from __future__ import annotations

import uuid

import click
import click_extra as clickx

from coursemanager.domain import Course

from .helpers import open_repositories, success


@click.group(cls=clickx.ExtraGroup)
def courses() -> None:
    """Browse and add courses."""


@courses.command("list")
@click.argument("author_id", type=click.UUID)
def list_courses(author_id: uuid.UUID) -> None:
    """List the courses of AUTHOR_ID (ID<TAB>TITLE)."""
    with open_repositories() as app:
        for course in app.courses.get_courses(author_id):
            click.echo(f"{course.id}\t{course.title}")


@courses.command("add")
@click.argument("author_id", type=click.UUID)
@click.argument("title")
@click.option("--description", help="Course description.")
def add_course(author_id: uuid.UUID, title: str, description: str | None) -> None:
    """Add a course titled TITLE to AUTHOR_ID and print its new ID."""
    course = Course(title=title, description=description)
    with open_repositories() as app:
        app.courses.add_course(author_id, course)
        app.courses.save_changes()
    click.echo(str(course.id))
    success(f"Course {title!r} added.")
