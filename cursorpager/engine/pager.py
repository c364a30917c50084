""" Pager: loads a page of rows and generates cursors to the neighboring pages """

from __future__ import annotations

import logging
from functools import partial
from typing import Generic, NamedTuple, Optional

from cursorpager import exc
from cursorpager.cursors import CursorRecord, EdgeRow, PageLinks, Direction, decode_cursor, calculate_page_links
from cursorpager.order import OrderMethod
from cursorpager.querier import Querier
from cursorpager.typing import RowT

from .settings import PagerSettings


logger = logging.getLogger(__name__)


class Page(NamedTuple):
    """ A page of rows with links to the neighboring pages """
    # Rows, in canonical order
    rows: list

    # Cursors to the prev and next pages
    links: PageLinks

    # Did the query return more rows than the page fits?
    has_more: bool


class CursorPager(Generic[RowT]):
    """ Cursor pager: paginates a querier with a particular ordering

    Example:
        pager = CursorPager(querier, Ordering('name', 'name', value_kind=ValueKind.STRING))
        page = pager.paginate('', limit=10)
        page = pager.paginate(page.links.next, limit=10)
    """
    # The data source
    querier: Querier[RowT]

    # Sort order
    order: OrderMethod

    # Settings: default limit, max limit
    settings: PagerSettings

    def __init__(self, querier: Querier[RowT], order: OrderMethod, settings: Optional[PagerSettings] = None):
        self.querier = querier
        self.order = order
        self.settings = settings or PagerSettings()

    __slots__ = 'querier', 'order', 'settings'

    @classmethod
    def prepare(cls, querier: Querier[RowT], settings: Optional[PagerSettings] = None):
        """ Prepare to paginate the provided querier

        Example:
            users_pager = CursorPager.prepare(users_querier)
            pager = users_pager(order=by_name)
            page = pager.paginate(cursor, limit)
        """
        return partial(cls, querier, settings=settings)

    def paginate(self, cursor: str, limit: Optional[int] = None) -> Page:
        """ Load a page

        Args:
            cursor: The cursor from a previous page, or an empty string to get the first page.
                A cursor that can't be decoded, or that was minted with a different ordering, gives the first page.
            limit: The number of rows per page. See PagerSettings.get_final_limit()

        Raises:
            exc.QueryFailedError: the querier has failed to fetch rows, or to get cursor values from them
            exc.NoDataError: the querier returned no rows
        """
        limit = self.settings.get_final_limit(limit)
        sub_cursor_name = self.order.cursor_key_name()
        order_token = self.order.order_token()

        # Decode the cursor. Fall back to the first page if it's no good.
        boundary = self._decode_cursor(cursor, sub_cursor_name)
        is_first_page = boundary is None
        direction = Direction.FORWARD if boundary is None else Direction.from_points_next(boundary.points_next)

        # Load rows. We will always load one more row to check if there's another page
        try:
            if boundary is None:
                logger.debug('Loading the first page: order=%s limit=%d', order_token, limit)
                rows = self.querier.fetch_first_page(order_token, limit + 1)
            else:
                logger.debug('Loading a page: order=%s limit=%d direction=%s', order_token, limit, direction.value)
                rows = self.querier.fetch_with_cursor(
                    sub_cursor_name, order_token, limit + 1,
                    direction.value, boundary.id, boundary.sub_cursor_value,
                )
        except Exception as e:
            raise exc.QueryFailedError(order_token, direction.value, str(e)) from e

        # No rows?
        if not rows:
            raise exc.NoDataError(order_token)

        # Have more rows? We've loaded one extra row. Now remove it.
        has_more = len(rows) > limit
        if has_more:
            rows = rows[:limit]

        # Backward pages are loaded nearest-first. Put them into canonical order.
        # This also makes the last loaded row the first row of the page, and vice versa.
        if direction is Direction.BACKWARD:
            rows = rows[::-1]

        # Cursor values of the edge rows
        try:
            first_row = self._edge_row(sub_cursor_name, rows[0])
            last_row = self._edge_row(sub_cursor_name, rows[-1])
        except Exception as e:
            raise exc.QueryFailedError(order_token, direction.value, str(e)) from e

        # Generate links
        links = calculate_page_links(
            is_first_page, has_more, direction,
            first_row=first_row,
            last_row=last_row,
            id_kind=self.order.cursor_id_kind(),
            value_kind=self.order.cursor_value_kind(),
        )

        # Done
        return Page(rows=self.settings.customize_rows(rows), links=links, has_more=has_more)

    def _decode_cursor(self, cursor: str, sub_cursor_name: str) -> Optional[CursorRecord]:
        """ Decode the cursor; get None if it can't be used with the current ordering """
        if not cursor:
            return None

        try:
            record = decode_cursor(cursor, id_kind=self.order.cursor_id_kind(), value_kind=self.order.cursor_value_kind())
        except exc.InvalidCursorError as e:
            logger.debug('Ignoring the cursor, loading the first page: %s', e)
            return None

        # Make sure the ordering is still the same
        if record.sub_cursor_name != sub_cursor_name:
            logger.debug('Ignoring the cursor, loading the first page: minted for sub-cursor %r, current is %r',
                         record.sub_cursor_name, sub_cursor_name)
            return None

        return record

    def _edge_row(self, sub_cursor_name: str, row: RowT) -> EdgeRow:
        id, value = self.querier.project_edge(sub_cursor_name, row)
        return EdgeRow(id=id, name=sub_cursor_name, value=value)


def paginate(querier: Querier[RowT], cursor: str, order: OrderMethod, limit: Optional[int] = None, *,
             settings: Optional[PagerSettings] = None) -> Page:
    """ Load a page of rows from the querier. See CursorPager.paginate() """
    return CursorPager(querier, order, settings).paginate(cursor, limit)
