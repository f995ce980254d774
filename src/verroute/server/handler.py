"""ASGI handler — translates ASGI scope/messages to verroute types.

The only component that touches raw ASGI HTTP messages. Converts the
scope to a Request, matches it against the compiled router, runs the
controller pipeline, and sends the Response back through ASGI send().

Controller pipeline for one request::

    user-auth injector -> before hooks -> handler -> after hooks
"""

from verroute._internal.asgi import Receive, Scope, Send
from verroute._internal.invoke import invoke, invoke_offloaded
from verroute.context import Context, context_var
from verroute.errors import HTTPError, Unauthorized
from verroute.http.request import Request
from verroute.http.response import Response
from verroute.routing.middleware import MiddlewareMap
from verroute.routing.route import RouteMatch
from verroute.routing.router import Router
from verroute.server.errors import handle_http_error, handle_internal_error
from verroute.server.negotiation import negotiate
from verroute.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: MiddlewareMap,
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    head = request.method == "HEAD"

    try:
        match = router.match("GET" if head else request.method, request.path)
        response = await dispatch(match, request, middleware)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send, head=head)


async def dispatch(match: RouteMatch, request: Request, middleware: MiddlewareMap) -> Response:
    """Run the matched entry's auth injector, hooks, and handler."""
    entry = match.route
    ctx = Context(request=request, params=match.path_params, version=entry.version)
    token = context_var.set(ctx)

    try:
        injector = entry.options.user_auth
        if injector is not None:
            user = await invoke(injector, ctx)
            if user is None:
                raise Unauthorized()
            ctx.user = user

        hooks = middleware.get(entry.controller, entry.slot)

        for hook in hooks.before:
            early = await invoke(hook, ctx)
            if early is not None:
                return negotiate(early, ctx)

        result = await invoke_offloaded(entry.handler, ctx)
        ctx.response = negotiate(result, ctx)

        for hook in hooks.after:
            replaced = await invoke(hook, ctx)
            if replaced is not None:
                ctx.response = negotiate(replaced, ctx)

        return ctx.response
    finally:
        context_var.reset(token)
