""" Pagination engine

Overview:

* CursorPager loads a page from a querier and generates cursors to the neighboring pages
* PagerSettings tune it: default and max limits, row customization
"""

from .pager import CursorPager, Page, paginate
from .settings import PagerSettings
