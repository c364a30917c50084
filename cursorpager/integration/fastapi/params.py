from __future__ import annotations

from collections import abc
from typing import NamedTuple, Optional, Any, TypedDict

import fastapi

from cursorpager.engine import Page


class CursorParams(NamedTuple):
    """ Pagination parameters of a request """
    # The cursor. Empty string for the first page
    cursor: str

    # Page size. None for the default
    limit: Optional[int]


def cursor_params(*,
        cursor: str = fastapi.Query(
            '',
            title='Pagination cursor.',
            description='Use `next_cursor` or `prev_cursor` from the previous response. Empty for the first page.',
        ),
        limit: Optional[int] = fastapi.Query(
            None,
            title='Pagination. The number of items per page.'
        ),
) -> CursorParams:
    """ Get the pagination parameters from the request

    Example:
        /api/users?cursor=eyJpZCI6Mi4uLn0=&limit=10
    """
    return CursorParams(cursor=cursor, limit=limit)


def page_response(page: Page, serialize: abc.Callable[[Any], Any] = lambda row: row) -> PageResponseDict:
    """ Get a JSON response for a page

    Example:
        @app.get('/api/users')
        def list_users(params: CursorParams = Depends(cursor_params)):
            page = users_pager.paginate(params.cursor, params.limit)
            return page_response(page)
    """
    return {  # type: ignore[return-value]
        'items': [serialize(row) for row in page.rows],
        **page.links.export(),
    }


class PageResponseDict(TypedDict):
    """ Paginated response """
    items: list
    next_cursor: str
    prev_cursor: str
