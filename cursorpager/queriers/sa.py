""" SqlAlchemy querier: paginate a table using keyset predicates """

from __future__ import annotations

import operator
from collections import abc
from typing import Optional, Union

import sqlalchemy as sa

from cursorpager.order import Ordering
from cursorpager.typing import SARowDict, CursorValue

from .base import OrderingsRegistry


class SAQuerier:
    """ A querier that loads rows from an SqlAlchemy table

    Keyset pagination: instead of OFFSET, every page is loaded with a WHERE condition
    that picks rows beyond the boundary row:

        SELECT * FROM users
        WHERE users.name > :name OR users.name = :name AND users.id > :id
        ORDER BY users.name ASC, users.id ASC
        LIMIT 11

    Backward pages flip every comparison and every ORDER BY direction,
    so that LIMIT keeps the rows nearest to the boundary.

    For this to be efficient, have an index on (field, id) for every ordering.

    Example:
        querier = SAQuerier(connection, User, [Ordering('default'), Ordering('name', 'name')])
        page = paginate(querier, cursor, Ordering('name', 'name'), 10)
    """

    # The connection to execute statements with
    connection: sa.engine.Connection

    # The table to load rows from
    table: sa.sql.FromClause

    # Known orderings
    orderings: OrderingsRegistry

    # The name of the id column
    id_column: str

    def __init__(self,
                 connection: sa.engine.Connection,
                 selectable: Union[sa.sql.FromClause, type],
                 orderings: abc.Iterable[Ordering],
                 *,
                 id_column: str = 'id'):
        self.connection = connection
        self.table = getattr(selectable, '__table__', selectable)  # declarative models have a __table__
        self.orderings = OrderingsRegistry(orderings)
        self.id_column = id_column

    __slots__ = 'connection', 'table', 'orderings', 'id_column'

    def fetch_first_page(self, order_token: str, limit: int) -> list[SARowDict]:
        ordering = self.orderings.get(order_token)
        stmt = self.statement(ordering, limit=limit)
        return self._fetchall(stmt)

    def fetch_with_cursor(self, sub_cursor_name: str, order_token: str, limit: int, direction: str,
                          cursor_id: CursorValue, sub_cursor_value: CursorValue) -> list[SARowDict]:
        ordering = self.orderings.get(order_token)

        if direction == 'next':
            stmt = self.statement(ordering, limit=limit, after=(cursor_id, sub_cursor_value))
        elif direction == 'prev':
            stmt = self.statement(ordering, limit=limit, before=(cursor_id, sub_cursor_value))
        else:
            raise ValueError(f'Unknown direction: {direction!r}')

        return self._fetchall(stmt)

    def project_edge(self, sub_cursor_name: str, row: SARowDict) -> tuple[CursorValue, CursorValue]:
        field = self.orderings.get_field(sub_cursor_name)
        value = None if field is None else row[field]
        return row[self.id_column], value

    def statement(self, ordering: Ordering, *, limit: int,
                  after: Optional[tuple[CursorValue, CursorValue]] = None,
                  before: Optional[tuple[CursorValue, CursorValue]] = None,
                  ) -> sa.sql.Select:
        """ Build the Select statement that loads a page

        Args:
            ordering: The sort order
            limit: The max number of rows to load
            after: (id, value) of the boundary row: load rows after it, in canonical order
            before: (id, value) of the boundary row: load rows before it, nearest first
        """
        reverse = before is not None
        stmt = sa.select(self.table)

        # WHERE
        boundary = after or before
        if boundary is not None:
            cursor_id, sub_cursor_value = boundary
            stmt = stmt.where(self.keyset_condition(ordering, cursor_id, sub_cursor_value, after=not reverse))

        # ORDER BY, LIMIT
        return stmt.order_by(*self.order_by(ordering, reverse=reverse)).limit(limit)

    def keyset_condition(self, ordering: Ordering, cursor_id: CursorValue, sub_cursor_value: CursorValue, *, after: bool) -> sa.sql.ColumnElement:
        """ Build a condition that picks rows strictly after (or before) the boundary row, in canonical order """
        id_col = self.table.c[self.id_column]
        id_op = operator.gt if after else operator.lt

        if ordering.field is None:
            return id_op(id_col, cursor_id)

        # For descending fields, "after" means "less than"
        field_col = self.table.c[ordering.field]
        value_op = operator.gt if after != ordering.descending else operator.lt

        return sa.or_(
            value_op(field_col, sub_cursor_value),
            sa.and_(field_col == sub_cursor_value, id_op(id_col, cursor_id)),
        )

    def order_by(self, ordering: Ordering, *, reverse: bool) -> list[sa.sql.ColumnElement]:
        """ Get ORDER BY clauses: canonical order, or reverse canonical order """
        id_col = self.table.c[self.id_column]
        clauses = []

        if ordering.field is not None:
            field_col = self.table.c[ordering.field]
            clauses.append(field_col.desc() if ordering.descending != reverse else field_col.asc())

        clauses.append(id_col.desc() if reverse else id_col.asc())
        return clauses

    def _fetchall(self, stmt: sa.sql.Select) -> list[SARowDict]:
        return [dict(row._mapping) for row in self.connection.execute(stmt)]
