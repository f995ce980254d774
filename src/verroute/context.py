"""Per-request context handed to controller handlers, hooks, and injectors.

Unlike the Request, the Context is mutable: injectors set ``user``,
handlers and hooks set ``response``, and anything may stash values in
``state`` for code further down the chain.

The current context is also published through a ContextVar so helpers
deep in a call stack can reach it without threading it through.
"""

from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from verroute.http.request import Request
from verroute.http.response import Response


@dataclass(slots=True)
class Context:
    """Mutable per-request state.

    Usage::

        class UserController:
            async def show(self, ctx: Context):
                ctx.response = Response.json({"id": ctx.params["id"]})
    """

    request: Request
    params: dict[str, str] = field(default_factory=dict)
    version: str = ""
    user: Any = None
    response: Response | None = None
    state: dict[str, Any] = field(default_factory=dict)


context_var: ContextVar[Context] = ContextVar("verroute_context")
"""The context of the request being dispatched."""


def get_context() -> Context:
    """Return the current context.

    Raises ``LookupError`` if called outside a request.
    """
    return context_var.get()
