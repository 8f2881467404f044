"""create catalog tables

Revision ID: 3f1c9a7e2b54
Revises:
Create Date: 2026-10-12 09:14:31.508220

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b54"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "countries",
        sa.Column(
            "id", sa.String(length=2), nullable=False, comment="Country code, e.g. 'BE'."
        ),
        sa.Column("seq", sa.Integer(), nullable=False, comment="Insertion order."),
        sa.Column("description", sa.String(length=250), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_countries")),
        sa.UniqueConstraint("seq", name=op.f("uq_countries_seq")),
        comment="Countries authors can be attached to.",
    )
    op.create_table(
        "authors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("seq", sa.Integer(), nullable=False, comment="Insertion order."),
        sa.Column("first_name", sa.String(length=50), nullable=True),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column(
            "country_id",
            sa.String(length=2),
            nullable=False,
            comment="Defaults to 'BE' at the repository level.",
        ),
        sa.ForeignKeyConstraint(
            ["country_id"],
            ["countries.id"],
            name=op.f("fk_authors_country_id_countries"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_authors")),
        sa.UniqueConstraint("seq", name=op.f("uq_authors_seq")),
        comment="Course authors.",
    )
    op.create_table(
        "courses",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("seq", sa.Integer(), nullable=False, comment="Insertion order."),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=1500), nullable=True),
        sa.Column("author_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ["author_id"],
            ["authors.id"],
            name=op.f("fk_courses_author_id_authors"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_courses")),
        sa.UniqueConstraint("seq", name=op.f("uq_courses_seq")),
        comment="Courses, each written by one author.",
    )
    op.create_index(
        op.f("ix_courses_author_id"), "courses", ["author_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_courses_author_id"), table_name="courses")
    op.drop_table("courses")
    op.drop_table("authors")
    op.drop_table("countries")
