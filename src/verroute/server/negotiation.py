"""Content negotiation — maps handler return values to Responses.

Handlers return whatever is natural; this is where it becomes HTTP.

    Response     -> as-is
    dict / list  -> JSON
    str          -> text/plain
    bytes        -> application/octet-stream
    (value, int) -> negotiate(value) with that status
    None         -> ctx.response, or 204 when the handler set nothing
"""

from typing import Any

from verroute.context import Context
from verroute.http.response import Response


def negotiate(value: Any, ctx: Context) -> Response:
    """Convert a handler return value to a Response."""
    if isinstance(value, Response):
        return value
    if value is None:
        if ctx.response is not None:
            return ctx.response
        return Response(status=204)
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[1], int):
        body, status = value
        return negotiate(body, ctx).with_status(status)
    if isinstance(value, (dict, list)):
        return Response.json(value)
    if isinstance(value, str):
        return Response(body=value)
    if isinstance(value, bytes):
        return Response(body=value, content_type="application/octet-stream")

    msg = f"Cannot convert {type(value).__name__} returned by a handler into a response."
    raise TypeError(msg)
