""" Cursors: opaque tokens that point to a page boundary """

from .values import ValueKind
from .cursor_data import CursorRecord, EdgeRow, NO_CURSOR, encode_cursor, decode_cursor
from .page_links import PageLinks, NO_LINKS
from .calculate import Direction, calculate_page_links
