from __future__ import annotations

import logging
from typing import NamedTuple

from cursorpager import exc
from cursorpager.typing import CursorValue

from .encode import encode_opaque_cursor, decode_opaque_cursor, DECODE_ERRORS
from .values import ValueKind


logger = logging.getLogger(__name__)


class CursorRecord(NamedTuple):
    """ Cursor data: a pointer to a row, and the direction to go from there """
    # Primary ordering key of the row. Unique within the listing
    id: CursorValue

    # The direction of the cursor.
    # True: the cursor yields rows after this one. False: rows before this one.
    points_next: bool

    # The name of the sub-cursor: which secondary sort field was active when the cursor was minted.
    # Is used to check that the user isn't mixing cursors from different sort orders
    sub_cursor_name: str

    # The value of the secondary sort field at the row the cursor points to
    sub_cursor_value: CursorValue

    # Is this a real cursor? An invalid record means "no cursor" and is never serialized
    valid: bool = True

    @classmethod
    def invalid(cls) -> CursorRecord:
        """ Get the "no cursor" record """
        return NO_CURSOR

    def serialize(self, *, id_kind: ValueKind = ValueKind.ANY, value_kind: ValueKind = ValueKind.ANY) -> dict:
        """ Get the JSON form of the cursor. Keys are part of the wire format: do not change them!

        Raises:
            exc.InvalidCursorError: a value does not match its kind
        """
        return {
            'id': id_kind.dump(self.id),
            'points_next': self.points_next,
            'sub_cursor_name': self.sub_cursor_name,
            'sub_cursor': value_kind.dump(self.sub_cursor_value),
        }

    def encode(self, *, id_kind: ValueKind = ValueKind.ANY, value_kind: ValueKind = ValueKind.ANY) -> str:
        return encode_cursor(self, id_kind=id_kind, value_kind=value_kind)

    @classmethod
    def decode(cls, cursor: str, *, id_kind: ValueKind = ValueKind.ANY, value_kind: ValueKind = ValueKind.ANY) -> CursorRecord:
        return decode_cursor(cursor, id_kind=id_kind, value_kind=value_kind)


# The "no cursor" record
NO_CURSOR = CursorRecord(id=None, points_next=False, sub_cursor_name='', sub_cursor_value=None, valid=False)


class EdgeRow(NamedTuple):
    """ The first or the last row of a page: the data to make a cursor from """
    id: CursorValue
    name: str
    value: CursorValue

    def to_cursor(self, points_next: bool) -> CursorRecord:
        """ Make a cursor that points away from this row """
        return CursorRecord(id=self.id, points_next=points_next, sub_cursor_name=self.name, sub_cursor_value=self.value)


def encode_cursor(record: CursorRecord, *, id_kind: ValueKind = ValueKind.ANY, value_kind: ValueKind = ValueKind.ANY) -> str:
    """ Encode a cursor record into an opaque string

    An invalid record gives an empty string.
    If the record can't be serialized, it gives an empty string as well:
    a missing link to the next page is better than a failed response.
    """
    if not record.valid:
        return ''

    try:
        return encode_opaque_cursor(record.serialize(id_kind=id_kind, value_kind=value_kind))
    except (exc.InvalidCursorError, TypeError, ValueError) as e:
        logger.warning('Failed to encode cursor %r: %s', record, e)
        return ''


def decode_cursor(cursor: str, *, id_kind: ValueKind = ValueKind.ANY, value_kind: ValueKind = ValueKind.ANY) -> CursorRecord:
    """ Decode an opaque string into a cursor record

    Raises:
        exc.InvalidCursorError: malformed base64, malformed JSON, missing fields, or values of a wrong type
    """
    try:
        data = decode_opaque_cursor(cursor)
    except DECODE_ERRORS as e:
        raise exc.InvalidCursorError(str(e)) from e

    # Every field is required
    missing = {'id', 'points_next', 'sub_cursor_name', 'sub_cursor'} - data.keys()
    if missing:
        raise exc.InvalidCursorError(f'missing fields: {", ".join(sorted(missing))}')

    # Check types
    if not isinstance(data['points_next'], bool):
        raise exc.InvalidCursorError('"points_next" must be a boolean')
    if not isinstance(data['sub_cursor_name'], str):
        raise exc.InvalidCursorError('"sub_cursor_name" must be a string')

    return CursorRecord(
        id=id_kind.load(data['id']),
        points_next=data['points_next'],
        sub_cursor_name=data['sub_cursor_name'],
        sub_cursor_value=value_kind.load(data['sub_cursor']),
    )
