""" GraphQL integration: the `PageInfo` type and its resolver helper """

from .schema import graphql_pager_schema, PageInfoType
from .pager import pager_info, PagerInfoDict
