""" Pagination for GraphQL """

from __future__ import annotations

from typing import TypedDict

from cursorpager.engine import Page


def pager_info(page: Page) -> PagerInfoDict:
    """ Get pagination cursors for the `PageInfo` type """
    return {
        'next_cursor': page.links.next,
        'prev_cursor': page.links.prev,
        'has_more': page.has_more,
    }


class PagerInfoDict(TypedDict):
    """ Pagination info object """
    next_cursor: str
    prev_cursor: str
    has_more: bool
