""" In-memory querier: paginate a plain Python list """

from __future__ import annotations

import operator
from collections import abc
from typing import Generic, Any

from cursorpager.order import Ordering
from cursorpager.typing import RowT, CursorValue

from .base import OrderingsRegistry


class ListQuerier(Generic[RowT]):
    """ A querier that paginates a list of dicts or objects

    Rows are sorted by the ordering's field, then by the id (ascending).
    Values of the field must be comparable, and not None.

    Example:
        querier = ListQuerier(users, [Ordering('default'), Ordering('name', 'name')])
        page = paginate(querier, '', Ordering('default'), 10)
    """

    # The rows
    items: list[RowT]

    # Known orderings
    orderings: OrderingsRegistry

    # The name of the id key or attribute
    id_key: str

    def __init__(self, items: abc.Iterable[RowT], orderings: abc.Iterable[Ordering], *, id_key: str = 'id'):
        self.items = list(items)
        self.orderings = OrderingsRegistry(orderings)
        self.id_key = id_key

    __slots__ = 'items', 'orderings', 'id_key'

    def fetch_first_page(self, order_token: str, limit: int) -> list[RowT]:
        ordering = self.orderings.get(order_token)
        return self._sorted(self.items, ordering, reverse=False)[:limit]

    def fetch_with_cursor(self, sub_cursor_name: str, order_token: str, limit: int, direction: str,
                          cursor_id: CursorValue, sub_cursor_value: CursorValue) -> list[RowT]:
        ordering = self.orderings.get(order_token)

        # WHERE
        if direction == 'next':
            filtered = [row for row in self.items if self._is_beyond(row, ordering, cursor_id, sub_cursor_value, after=True)]
        elif direction == 'prev':
            filtered = [row for row in self.items if self._is_beyond(row, ordering, cursor_id, sub_cursor_value, after=False)]
        else:
            raise ValueError(f'Unknown direction: {direction!r}')

        # ORDER BY, LIMIT
        return self._sorted(filtered, ordering, reverse=direction == 'prev')[:limit]

    def project_edge(self, sub_cursor_name: str, row: RowT) -> tuple[CursorValue, CursorValue]:
        field = self.orderings.get_field(sub_cursor_name)
        value = None if field is None else get_value(row, field)
        return get_value(row, self.id_key), value

    def _sorted(self, rows: list[RowT], ordering: Ordering, *, reverse: bool) -> list[RowT]:
        """ Sort rows in canonical order, or in reverse canonical order """
        # Sort by the id, then by the field. The sort is stable, so ties keep their id order
        result = sorted(rows, key=lambda row: get_value(row, self.id_key), reverse=reverse)
        if ordering.field is not None:
            field = ordering.field
            result.sort(key=lambda row: get_value(row, field), reverse=ordering.descending != reverse)
        return result

    def _is_beyond(self, row: RowT, ordering: Ordering, cursor_id: Any, sub_cursor_value: Any, *, after: bool) -> bool:
        """ Check whether the row is strictly after (or before) the keyset boundary, in canonical order """
        id_op = operator.gt if after else operator.lt
        row_id = get_value(row, self.id_key)

        if ordering.field is None:
            return id_op(row_id, cursor_id)

        value = get_value(row, ordering.field)
        if value == sub_cursor_value:
            return id_op(row_id, cursor_id)

        # For descending fields, "after" means "less than"
        value_op = operator.gt if after != ordering.descending else operator.lt
        return value_op(value, sub_cursor_value)


def get_value(row: Any, key: str) -> Any:
    """ Get a value from a dict row, or an attribute from an object row """
    if isinstance(row, abc.Mapping):
        return row[key]
    else:
        return getattr(row, key)
