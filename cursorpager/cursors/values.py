""" Cursor value kinds

A cursor stores two values: the row id and the value of the sub-cursor (the secondary sort field).
On the wire, both are JSON scalars. In Python, they may be ints, strings, or datetimes.

A ValueKind knows how to convert a value into its JSON form and back.
When the JSON value does not have the expected type, it fails with InvalidCursorError:
a timestamp cursor that carries a number is a broken cursor, not a zero timestamp.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone, timedelta
from enum import Enum

from cursorpager import exc
from cursorpager.typing import CursorValue, JSONScalar


class ValueKind(Enum):
    """ The type of a cursor value """
    # Any JSON scalar, passed through as is
    ANY = 'any'

    # No value at all: the ordering has no secondary sort field
    NULL = 'null'

    # An integer (but not a bool)
    INTEGER = 'integer'

    # A string
    STRING = 'string'

    # A datetime. Encoded as an RFC 3339 string
    TIMESTAMP = 'timestamp'

    def dump(self, value: CursorValue) -> JSONScalar:
        """ Convert a Python value into its JSON form

        Raises:
            exc.InvalidCursorError: the value does not belong to this kind
        """
        if self is ValueKind.ANY:
            # Only JSON scalars: they load back unchanged. Datetimes need TIMESTAMP
            if not isinstance(value, (str, int, float, bool, type(None))):
                raise exc.InvalidCursorError(f'cannot store a value of type {type(value).__name__}; declare its ValueKind')
            return value
        elif self is ValueKind.TIMESTAMP:
            if not isinstance(value, datetime):
                raise exc.InvalidCursorError(f'expected a datetime, got {type(value).__name__}')
            return format_rfc3339(value)
        else:
            return self.load(value)  # type: ignore[arg-type]

    def load(self, value: JSONScalar) -> CursorValue:
        """ Convert a JSON value into its Python form

        Raises:
            exc.InvalidCursorError: the value does not belong to this kind
        """
        if self is ValueKind.ANY:
            if not isinstance(value, (str, int, float, bool, type(None))):
                raise exc.InvalidCursorError(f'expected a scalar, got {type(value).__name__}')
            return value
        elif self is ValueKind.NULL:
            if value is not None:
                raise exc.InvalidCursorError(f'expected null, got {type(value).__name__}')
            return None
        elif self is ValueKind.INTEGER:
            if not isinstance(value, int) or isinstance(value, bool):
                raise exc.InvalidCursorError(f'expected an integer, got {type(value).__name__}')
            return value
        elif self is ValueKind.STRING:
            if not isinstance(value, str):
                raise exc.InvalidCursorError(f'expected a string, got {type(value).__name__}')
            return value
        elif self is ValueKind.TIMESTAMP:
            if not isinstance(value, str):
                raise exc.InvalidCursorError(f'expected a timestamp string, got {type(value).__name__}')
            return parse_rfc3339(value)
        else:
            raise NotImplementedError(self)


# RFC 3339 date-time, with an optional fraction of any length
RFC3339_RE = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$'
)


def format_rfc3339(value: datetime) -> str:
    """ Format a datetime as an RFC 3339 string, in its canonical JSON form

    * UTC offset is written as "Z"
    * Trailing zeros in the fraction are trimmed; no fraction at all when it's zero
    * Naive datetimes are taken to be UTC
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    # strftime() does not zero-pad years before 1000 on every platform
    text = f'{value.year:04d}-{value.month:02d}-{value.day:02d}T{value.hour:02d}:{value.minute:02d}:{value.second:02d}'
    if value.microsecond:
        text += f'.{value.microsecond:06d}'.rstrip('0')

    offset = value.utcoffset()
    if not offset:
        return text + 'Z'

    minutes = int(offset.total_seconds()) // 60
    sign = '+' if minutes >= 0 else '-'
    hours, minutes = divmod(abs(minutes), 60)
    return f'{text}{sign}{hours:02d}:{minutes:02d}'


def parse_rfc3339(value: str) -> datetime:
    """ Parse an RFC 3339 timestamp into an aware datetime

    Fractions beyond microseconds are truncated.

    Raises:
        exc.InvalidCursorError: not a valid timestamp
    """
    m = RFC3339_RE.match(value)
    if m is None:
        raise exc.InvalidCursorError(f'malformed timestamp: {value!r}')

    year, month, day, hour, minute, second, fraction, offset = m.groups()

    microsecond = int((fraction or '0')[:6].ljust(6, '0'))

    try:
        # Time zone
        if offset in ('Z', 'z'):
            tz = timezone.utc
        else:
            sign = 1 if offset[0] == '+' else -1
            tz = timezone(sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6])))

        return datetime(int(year), int(month), int(day), int(hour), int(minute), int(second), microsecond, tzinfo=tz)
    except ValueError as e:
        raise exc.InvalidCursorError(f'malformed timestamp: {value!r}') from e
