""" Order methods: how a listing is sorted """

from __future__ import annotations

import dataclasses
from typing import Optional, Protocol, runtime_checkable

from cursorpager.cursors.values import ValueKind


@runtime_checkable
class OrderMethod(Protocol):
    """ Sort order of a listing

    The pager does not sort anything. It only needs to know:
    * which sub-cursor the ordering uses (to reject cursors minted with a different ordering),
    * an opaque token to pass on to the querier,
    * the types of cursor values, to reject cursors that carry values of a wrong type.
    """

    def cursor_key_name(self) -> str:
        """ Get the name of the secondary sort field. Orderings that sort on the same field in different directions may share it """

    def order_token(self) -> str:
        """ Get the opaque token that tells the querier how to sort """

    def cursor_id_kind(self) -> ValueKind:
        """ Get the type of row ids """

    def cursor_value_kind(self) -> ValueKind:
        """ Get the type of the secondary sort field """


@dataclasses.dataclass(frozen=True)
class Ordering:
    """ A declarative order method, understood by the bundled queriers

    Rows are sorted by `field` first, then by the id, which makes the order total.
    The id is always ascending; `descending` only applies to `field`.

    Example:
        by_age = Ordering('age', 'age', value_kind=ValueKind.INTEGER)
        by_age_desc = Ordering('r_age', 'age', value_kind=ValueKind.INTEGER, descending=True)
        by_id = Ordering('default')
    """
    # The token that identifies this ordering
    token: str

    # The secondary sort field: attribute name, dict key, or column name.
    # None: sort by the id alone
    field: Optional[str] = None

    # Name of the sub-cursor. Defaults to the field name, or to the token when there's no field
    key_name: Optional[str] = None

    # Sort `field` in descending order?
    descending: bool = False

    # Type of the `field` values.
    # ANY only works for JSON scalars: datetime fields need ValueKind.TIMESTAMP
    value_kind: ValueKind = ValueKind.ANY

    # Type of the ids
    id_kind: ValueKind = ValueKind.ANY

    def __post_init__(self):
        # No field means no value
        if self.field is None and self.value_kind is ValueKind.ANY:
            object.__setattr__(self, 'value_kind', ValueKind.NULL)
        if self.field is None and self.descending:
            raise ValueError(f'Ordering {self.token!r}: cannot sort descending without a field')

    def cursor_key_name(self) -> str:
        return self.key_name or self.field or self.token

    def order_token(self) -> str:
        return self.token

    def cursor_id_kind(self) -> ValueKind:
        return self.id_kind

    def cursor_value_kind(self) -> ValueKind:
        return self.value_kind
