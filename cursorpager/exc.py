class BaseCursorPagerError(Exception):
    pass


class InvalidCursorError(BaseCursorPagerError):
    """ The cursor could not be decoded

    Reported when the cursor is not valid base64, not a JSON object, misses a field,
    or holds a value of the wrong type for the current ordering.

    The pager recovers from it: the user gets the first page instead.
    """

    def __init__(self, err: str):
        super().__init__(f'Invalid cursor: {err}')


class NoDataError(BaseCursorPagerError):
    """ The query returned no rows: there is nothing to paginate """

    def __init__(self, order_token: str):
        self.order_token = order_token
        super().__init__(f'Cursor pagination target data does not exist (order: {order_token!r})')


class QueryFailedError(BaseCursorPagerError):
    """ The querier failed to fetch a page

    The original exception is available as `__cause__`
    """

    def __init__(self, order_token: str, direction: str, err: str):
        self.order_token = order_token
        self.direction = direction
        super().__init__(f'Failed to run query (order: {order_token!r}, direction: {direction}): {err}')


class UnknownOrderingError(BaseCursorPagerError, KeyError):
    """ A querier was asked to use an order token it does not know about

    This is a programming error: the querier and the order method disagree.
    """

    def __init__(self, order_token: str):
        self.order_token = order_token
        super().__init__(f'Unknown ordering: {order_token!r}')

    def __str__(self):
        return self.args[0]
