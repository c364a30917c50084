from datetime import datetime
from typing import TypeVar, Union


# Annotation for a row returned by a querier. The pager never looks inside
RowT = TypeVar('RowT')

# Annotation for a JSON scalar, as stored inside a cursor
JSONScalar = Union[str, int, float, bool, None]

# Annotation for a cursor id or a sub-cursor value, as used in Python
CursorValue = Union[str, int, float, bool, datetime, None]

# Annotation for dict rows (result rows returned as dicts)
SARowDict = dict
