""" FastAPI integration: get pagination parameters from the request, render pages """

from .params import cursor_params, CursorParams, page_response, PageResponseDict
