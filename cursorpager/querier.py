""" Queriers: the data source that the pager fetches rows from """

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cursorpager.typing import RowT, CursorValue


@runtime_checkable
class Querier(Protocol[RowT]):
    """ A data source that can load pages of rows using keyset predicates

    Rows are sorted by the secondary field in the direction that the order token defines,
    and then by the id. That's the "canonical" order.
    """

    def fetch_with_cursor(self,
                          sub_cursor_name: str,
                          order_token: str,
                          limit: int,
                          direction: str,
                          cursor_id: CursorValue,
                          sub_cursor_value: CursorValue,
                          ) -> list[RowT]:
        """ Load at most `limit` rows strictly beyond the keyset boundary

        Args:
            sub_cursor_name: The name of the secondary sort field
            order_token: The ordering to use
            limit: The max number of rows to load
            direction:
                "next": rows after the boundary, in canonical order.
                "prev": rows before the boundary, in reverse canonical order: nearest to the boundary first.
            cursor_id: The id of the boundary row
            sub_cursor_value: The secondary sort field value of the boundary row
        """

    def fetch_first_page(self, order_token: str, limit: int) -> list[RowT]:
        """ Load the first `limit` rows, in canonical order """

    def project_edge(self, sub_cursor_name: str, row: RowT) -> tuple[CursorValue, CursorValue]:
        """ Get (id, secondary sort field value) of a row """
