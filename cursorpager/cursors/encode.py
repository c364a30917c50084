from __future__ import annotations

import base64
import binascii
import json


# Characters that are escaped inside strings by HTML-safe JSON encoders.
# Escape them as well: cursors must be byte-for-byte identical to those minted by other services.
_JSON_HTML_ESCAPES = {
    '<': '\\u003c',
    '>': '\\u003e',
    '&': '\\u0026',
    '\u2028': '\\u2028',
    '\u2029': '\\u2029',
}
_JSON_HTML_ESCAPE_TABLE = str.maketrans(_JSON_HTML_ESCAPES)


def encode_opaque_cursor(data: dict) -> str:
    """ Encode a dict of data as an opaque cursor: compact JSON, then standard base64

    Raises:
        TypeError, ValueError: the data is not JSON-serializable
    """
    serialized = json.dumps(data, separators=(',', ':'), ensure_ascii=False, allow_nan=False)
    serialized = serialized.translate(_JSON_HTML_ESCAPE_TABLE)
    return base64.b64encode(serialized.encode()).decode()


def decode_opaque_cursor(cursor: str) -> dict:
    """ Decode an opaque cursor into a data dict

    Raises:
        ValueError: all sorts of errors related to a bad cursor
    """
    # Padding is mandatory. Without this check, a stray "=" after a complete quantum would be silently ignored
    if len(cursor) % 4:
        raise binascii.Error('Incorrect padding')

    raw = base64.b64decode(cursor, validate=True)  # binascii.Error, ValueError (non-ASCII)
    try:
        data = json.loads(raw.decode())  # UnicodeDecodeError, json.decoder.JSONDecodeError
    except RecursionError as e:
        raise ValueError('Cursor JSON is nested too deeply') from e
    if not isinstance(data, dict):
        raise ValueError(f'Cursor must be an object, got {type(data).__name__}')
    return data


# Errors that decode_opaque_cursor() may raise
# binascii.Error, UnicodeDecodeError and JSONDecodeError are all ValueErrors
DECODE_ERRORS = (binascii.Error, UnicodeDecodeError, json.JSONDecodeError, ValueError)
