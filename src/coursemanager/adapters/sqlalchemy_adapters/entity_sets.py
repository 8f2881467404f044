"""SQLAlchemy entity sets.

Each set maps one table from `coursemanager.adapters.db.schema` onto one
entity class. Column names equal attribute names, except for the ``seq``
column which only exists in storage and drives ordering.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError

from coursemanager.adapters.db.schema import SEQ_COLUMN, authors, countries, courses
from coursemanager.domain import Author, Country, Course
from coursemanager.interfaces.entity_set import ChangeKind, EntitySet, StagedChange
from coursemanager.interfaces.errors import ConcurrencyError

from .errors import translate_integrity_error

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Row
    from sqlalchemy.sql.elements import ColumnElement

E = TypeVar("E")

#: Largest value SQLite (and a BIGINT) can bind for OFFSET and LIMIT.
MAX_BOUND_INTEGER = 2**63 - 1


class SqlAlchemyEntitySet(EntitySet[E]):
    """Shared mechanics for table-backed entity sets."""

    TABLE: ClassVar[Table]
    ENTITY_CLASS: ClassVar[type]

    def __init__(self, connect: Callable[[], Connection]) -> None:
        super().__init__()
        self._connect = connect

    @property
    def connection(self) -> Connection:
        """The unit of work's connection, opened on first use."""
        return self._connect()

    @property
    def _attrs(self) -> list[str]:
        return [column.name for column in self.TABLE.columns if column.name != SEQ_COLUMN]

    def _to_row(self, entity: E) -> dict[str, Any]:
        return {attr: getattr(entity, attr) for attr in self._attrs}

    def _from_row(self, row: Row) -> E:
        mapping = row._mapping  # pylint: disable=protected-access
        return self.ENTITY_CLASS(**{attr: mapping[attr] for attr in self._attrs})

    def _criteria(self, where: Mapping[str, Any] | None) -> list[ColumnElement[bool]]:
        return [self.TABLE.c[attr] == value for attr, value in (where or {}).items()]

    def _key_column(self):
        return self.TABLE.c[self.KEY_ATTR]

    # --- committed reads ---

    def get(self, key: Any) -> E | None:
        stmt = select(self.TABLE).where(self._key_column() == key)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return self._from_row(row)

    def find(
        self,
        where: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[E]:
        # no table holds more rows than an OFFSET can skip
        if offset > MAX_BOUND_INTEGER:
            return []
        if limit is not None:
            limit = min(limit, MAX_BOUND_INTEGER)
        stmt = (
            select(self.TABLE)
            .where(*self._criteria(where))
            .order_by(self.TABLE.c[SEQ_COLUMN])
            .offset(offset)
            .limit(limit)
        )
        return [self._from_row(row) for row in self.connection.execute(stmt)]

    def count(self, where: Mapping[str, Any] | None = None) -> int:
        stmt = select(func.count()).select_from(self.TABLE).where(*self._criteria(where))
        return int(self.connection.execute(stmt).scalar_one())

    # --- writes (called by the unit of work during commit) ---

    def apply(self, change: StagedChange[E]) -> None:
        """Execute the statement for one staged change on the open transaction.

        Raises:
            ConstraintViolationError: If the statement violates a constraint.
            ConcurrencyError: If an update or removal matched no row.
        """
        key = self.key_of(change.entity)
        try:
            match change.kind:
                case ChangeKind.ADDED:
                    self._insert(change.entity)
                case ChangeKind.MODIFIED:
                    self._update(change.entity)
                case ChangeKind.REMOVED:
                    self._delete(key)
        except IntegrityError as e:
            raise translate_integrity_error(e, self.KIND, str(key)) from e

    def _insert(self, entity: E) -> None:
        seq_column = self.TABLE.c[SEQ_COLUMN]
        next_seq = self.connection.execute(
            select(func.coalesce(func.max(seq_column), 0) + 1)
        ).scalar_one()
        self.connection.execute(
            insert(self.TABLE).values(**self._to_row(entity), **{SEQ_COLUMN: next_seq})
        )

    def _update(self, entity: E) -> None:
        key = self.key_of(entity)
        result = self.connection.execute(
            update(self.TABLE)
            .where(self._key_column() == key)
            .values(**self._to_row(entity))
        )
        if result.rowcount == 0:
            raise ConcurrencyError(self.KIND, str(key))

    def _delete(self, key: Any) -> None:
        result = self.connection.execute(
            delete(self.TABLE).where(self._key_column() == key)
        )
        if result.rowcount == 0:
            raise ConcurrencyError(self.KIND, str(key))


class SqlAlchemyCountrySet(SqlAlchemyEntitySet[Country]):
    """Countries stored in the ``countries`` table."""

    KIND = "country"
    TABLE = countries
    ENTITY_CLASS = Country


class SqlAlchemyAuthorSet(SqlAlchemyEntitySet[Author]):
    """Authors stored in the ``authors`` table."""

    KIND = "author"
    TABLE = authors
    ENTITY_CLASS = Author


class SqlAlchemyCourseSet(SqlAlchemyEntitySet[Course]):
    """Courses stored in the ``courses`` table."""

    KIND = "course"
    TABLE = courses
    ENTITY_CLASS = Course
