""" Walk pages the way a user would: follow cursors """

from __future__ import annotations

from collections import abc
from typing import Optional

from cursorpager.engine import CursorPager, Page


def walk_pages(pager: CursorPager, limit: int, directions: abc.Iterable[str], *,
               tamper: abc.Container[int] = (), cursor: str = '') -> list[Page]:
    """ Load a page, follow a cursor, load another page, and so on

    Args:
        pager: The pager to use
        limit: Page size
        directions: Which cursor to follow after each page: "next" or "prev".
            One page is loaded initially, and one more per direction.
        tamper: Indexes of the directions whose cursor gets corrupted before it's used
        cursor: The cursor to start with

    Example:
        pages = walk_pages(pager, 2, ['next', 'next', 'prev'])
        assert [page.rows for page in pages] == ...
    """
    pages = [pager.paginate(cursor, limit)]

    for i, direction in enumerate(directions):
        links = pages[-1].links
        if direction == 'next':
            cursor = links.next
        elif direction == 'prev':
            cursor = links.prev
        else:
            raise ValueError(f'Unknown direction: {direction!r}')

        if i in tamper:
            cursor = cursor + 'invalid'

        pages.append(pager.paginate(cursor, limit))

    return pages


def walk_forward(pager: CursorPager, limit: int, *, max_pages: Optional[int] = None) -> list[Page]:
    """ Load the first page, then follow `next` until there's no next page """
    pages = [pager.paginate('', limit)]
    while pages[-1].links.next:
        if max_pages is not None and len(pages) >= max_pages:
            raise AssertionError(f'Pagination did not finish in {max_pages} pages')
        pages.append(pager.paginate(pages[-1].links.next, limit))
    return pages
