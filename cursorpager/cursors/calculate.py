""" Pagination calculator: decide which cursors a page gets """

from __future__ import annotations

from enum import Enum

from .cursor_data import EdgeRow, encode_cursor, NO_CURSOR
from .page_links import PageLinks
from .values import ValueKind


class Direction(Enum):
    """ The direction a cursor takes you in. The value is what queriers receive """
    FORWARD = 'next'
    BACKWARD = 'prev'

    @classmethod
    def from_points_next(cls, points_next: bool) -> Direction:
        return cls.FORWARD if points_next else cls.BACKWARD


def calculate_page_links(is_first_page: bool,
                         has_more: bool,
                         direction: Direction,
                         first_row: EdgeRow,
                         last_row: EdgeRow,
                         *,
                         id_kind: ValueKind = ValueKind.ANY,
                         value_kind: ValueKind = ValueKind.ANY,
                         ) -> PageLinks:
    """ Generate cursors to the prev and next pages

    Args:
        is_first_page: Was the page requested without a cursor?
        has_more: Did the query return more rows than the page can fit?
            For a forward page, it means there's a next page; for a backward page, there's a previous one.
        direction: The direction of the cursor the page was requested with. Ignored for the first page.
        first_row: The first row of the page, in canonical order
        last_row: The last row of the page, in canonical order
        id_kind: How to encode row ids
        value_kind: How to encode sub-cursor values
    """
    next_cursor = prev_cursor = NO_CURSOR

    if is_first_page:
        # Nothing behind the first page
        if has_more:
            next_cursor = last_row.to_cursor(points_next=True)
    elif direction is Direction.FORWARD:
        # We came here going forward, so there's always a page behind us
        if has_more:
            next_cursor = last_row.to_cursor(points_next=True)
        prev_cursor = first_row.to_cursor(points_next=False)
    else:
        # We came here going backward, so there's always a page ahead of us
        next_cursor = last_row.to_cursor(points_next=True)
        if has_more:
            prev_cursor = first_row.to_cursor(points_next=False)

    return PageLinks(
        prev=encode_cursor(prev_cursor, id_kind=id_kind, value_kind=value_kind),
        next=encode_cursor(next_cursor, id_kind=id_kind, value_kind=value_kind),
    )
