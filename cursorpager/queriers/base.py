from __future__ import annotations

from collections import abc
from typing import Optional

from cursorpager import exc
from cursorpager.order import Ordering


class OrderingsRegistry:
    """ Orderings that a querier understands, by their tokens """

    # Ordering token => Ordering
    orderings: dict[str, Ordering]

    # Sub-cursor name => field name.
    # Orderings may share a sub-cursor name, but only if they sort on the same field
    fields: dict[str, Optional[str]]

    def __init__(self, orderings: abc.Iterable[Ordering]):
        self.orderings = {}
        self.fields = {}

        for ordering in orderings:
            key_name = ordering.cursor_key_name()
            if self.fields.get(key_name, ordering.field) != ordering.field:
                raise ValueError(f'Sub-cursor {key_name!r} is used with different fields: '
                                 f'{self.fields[key_name]!r} and {ordering.field!r}')

            self.orderings[ordering.token] = ordering
            self.fields[key_name] = ordering.field

    __slots__ = 'orderings', 'fields'

    def get(self, order_token: str) -> Ordering:
        """ Get an ordering by its token, or fail """
        try:
            return self.orderings[order_token]
        except KeyError:
            raise exc.UnknownOrderingError(order_token) from None

    def get_field(self, sub_cursor_name: str) -> Optional[str]:
        """ Get the field name for a sub-cursor, or fail """
        try:
            return self.fields[sub_cursor_name]
        except KeyError:
            raise exc.UnknownOrderingError(sub_cursor_name) from None
