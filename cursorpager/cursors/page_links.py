from typing import NamedTuple


class PageLinks(NamedTuple):
    """ Links to the prev/next pages """
    # Cursor to the previous page; empty string when there's no previous page
    prev: str

    # Cursor to the next page; empty string when there's no next page
    next: str

    def export(self) -> dict:
        """ Export as a JSON-friendly dict """
        return {'next_cursor': self.next, 'prev_cursor': self.prev}


# No links at all
NO_LINKS = PageLinks(prev='', next='')
