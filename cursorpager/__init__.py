from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('cursorpager')
except PackageNotFoundError:  # not installed, e.g. running from a source checkout
    __version__ = '0.0.0'

from .engine import CursorPager, Page, PagerSettings, paginate
from .order import OrderMethod, Ordering
from .querier import Querier
from .cursors import ValueKind, CursorRecord, PageLinks, Direction
from .cursors import encode_cursor, decode_cursor, calculate_page_links

from . import exc
from . import queriers
