from datetime import datetime, timezone, timedelta

import pytest

from cursorpager import exc
from cursorpager.cursors.values import ValueKind, format_rfc3339, parse_rfc3339


@pytest.mark.parametrize(('value', 'expected'), [
    (datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc), '2023-01-02T03:04:05Z'),
    # Fraction: trailing zeros trimmed
    (datetime(2023, 1, 2, 3, 4, 5, 120000, tzinfo=timezone.utc), '2023-01-02T03:04:05.12Z'),
    (datetime(2023, 1, 2, 3, 4, 5, 1, tzinfo=timezone.utc), '2023-01-02T03:04:05.000001Z'),
    # Offsets
    (datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=9))), '2023-01-02T03:04:05+09:00'),
    (datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone(-timedelta(hours=5, minutes=30))), '2023-01-02T03:04:05-05:30'),
    # Naive: taken to be UTC
    (datetime(2023, 1, 2, 3, 4, 5), '2023-01-02T03:04:05Z'),
    # Early years are zero-padded
    (datetime(987, 1, 2, tzinfo=timezone.utc), '0987-01-02T00:00:00Z'),
])
def test_format_rfc3339(value: datetime, expected: str):
    assert format_rfc3339(value) == expected


@pytest.mark.parametrize(('value', 'expected'), [
    ('2023-01-02T03:04:05Z', datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
    ('2023-01-02t03:04:05z', datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
    ('2023-01-02T03:04:05+09:00', datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=9)))),
    # Nanoseconds are truncated to microseconds
    ('2023-01-02T03:04:05.123456789Z', datetime(2023, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)),
    ('2023-01-02T03:04:05.5Z', datetime(2023, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc)),
])
def test_parse_rfc3339(value: str, expected: datetime):
    result = parse_rfc3339(value)
    assert result == expected
    assert result.utcoffset() == expected.utcoffset()


@pytest.mark.parametrize('value', [
    '',
    '2023-01-02',
    '2023-01-02 03:04:05',
    '2023-01-02T03:04:05',  # no offset
    '2023-13-02T03:04:05Z',  # no such month
    '2023-01-02T25:04:05Z',  # no such hour
    '2023-01-02T03:04:05+99:00',  # no such offset
    '0001-01-01T00:00:00Z trailing',
])
def test_parse_rfc3339_invalid(value: str):
    with pytest.raises(exc.InvalidCursorError):
        parse_rfc3339(value)


def test_value_kinds():
    """ Every kind accepts its own values and rejects others """
    # ANY: every scalar
    for value in ('a', 1, 1.5, True, None):
        assert ValueKind.ANY.load(value) == value
        assert ValueKind.ANY.dump(value) == value

    # ANY: datetimes are refused, because they would not load back
    with pytest.raises(exc.InvalidCursorError):
        ValueKind.ANY.dump(datetime(2023, 1, 2, tzinfo=timezone.utc))

    # NULL
    assert ValueKind.NULL.load(None) is None
    assert ValueKind.NULL.dump(None) is None

    # INTEGER: bools are not integers here
    assert ValueKind.INTEGER.load(10) == 10
    assert ValueKind.INTEGER.dump(10) == 10

    # STRING
    assert ValueKind.STRING.load('a') == 'a'

    # TIMESTAMP
    assert ValueKind.TIMESTAMP.load('2023-01-02T00:00:00Z') == datetime(2023, 1, 2, tzinfo=timezone.utc)
    assert ValueKind.TIMESTAMP.dump(datetime(2023, 1, 2, tzinfo=timezone.utc)) == '2023-01-02T00:00:00Z'

    # Mismatches
    for kind, value in [
        (ValueKind.ANY, [1]),
        (ValueKind.ANY, {'a': 1}),
        (ValueKind.NULL, 0),
        (ValueKind.NULL, ''),
        (ValueKind.INTEGER, True),
        (ValueKind.INTEGER, 1.0),
        (ValueKind.INTEGER, '1'),
        (ValueKind.INTEGER, None),
        (ValueKind.STRING, 1),
        (ValueKind.STRING, None),
        (ValueKind.TIMESTAMP, 1),
        (ValueKind.TIMESTAMP, None),
    ]:
        with pytest.raises(exc.InvalidCursorError):
            kind.load(value)

    # Dump mismatches
    with pytest.raises(exc.InvalidCursorError):
        ValueKind.TIMESTAMP.dump('2023-01-02T00:00:00Z')
    with pytest.raises(exc.InvalidCursorError):
        ValueKind.ANY.dump(object())  # type: ignore[arg-type]
