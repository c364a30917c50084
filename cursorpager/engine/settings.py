from __future__ import annotations

import dataclasses
from typing import Optional, Any


@dataclasses.dataclass
class PagerSettings:
    """ Settings for the pager

    This object defines additional behavior: default and max page sizes, customized rows.
    """
    # The `limit` you get by default, if not specified
    default_limit: int = 20

    # The max number of items you get, regardless of the limit
    max_limit: Optional[int] = None

    def __post_init__(self):
        if self.default_limit < 1:
            raise ValueError(f'default_limit must be positive, got {self.default_limit}')
        if self.max_limit is not None and self.max_limit < 1:
            raise ValueError(f'max_limit must be positive, got {self.max_limit}')

    def get_final_limit(self, limit: Optional[int]) -> int:
        """ Callback that fine-tunes the `limit` of a page by applying default and max limits

        Zero and negative limits are replaced with the default limit.
        """
        # Apply default limit
        if limit is None or limit < 1:
            limit = self.default_limit

        # Apply max limit
        if self.max_limit:
            limit = min(limit, self.max_limit)

        # Done
        return limit

    def customize_rows(self, rows: list[Any]) -> list[Any]:
        """ Callback that customizes page rows

        Used by: the pager, right before rows are returned to the user.
        Rows are already trimmed and in canonical order; cursors are computed from them before this hook runs.

        Default behavior: none
        You can override this method for custom behavior
        """
        return rows
