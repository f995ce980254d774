"""Error handling pipeline.

Maps HTTPError exceptions and unexpected failures to JSON error
responses of the shape ``{"error": detail, "status": code}``.
"""

import logging
import traceback

from verroute.errors import HTTPError
from verroute.http.request import Request
from verroute.http.response import Response

logger = logging.getLogger("verroute.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Render an HTTPError with its status and headers."""
    if exc.status >= 500:
        logger.error("%s %s -> %s", request.method, request.path, exc)
    else:
        logger.debug("%s %s -> %s", request.method, request.path, exc)

    response = Response.json({"error": exc.detail, "status": exc.status}, status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Log an unexpected exception and render a 500."""
    logger.exception("Unhandled error in %s %s", request.method, request.path)

    detail = "Internal Server Error"
    if debug:
        detail = "".join(traceback.format_exception(exc))
    return Response.json({"error": detail, "status": 500}, status=500)
