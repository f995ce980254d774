"""verroute — versioned REST routes with per-version inheritance.

Controllers are registered under an API version and a resource path.
Each version inherits every route of the version before it and
overrides only the paths it registers again.

Basic usage::

    from verroute import App

    app = App()

    @app.route("posts", "v1")
    class PostController:
        async def index(self, ctx):
            return [{"id": 1}]

        async def show(self, ctx):
            return {"id": ctx.params["id"]}

    @app.route("users", "v2")
    class UserController:
        async def index(self, ctx):
            return []

    # GET /v1/posts, GET /v1/posts/:id,
    # GET /v2/posts, GET /v2/posts/:id, GET /v2/users
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "Binding",
    "ConfigurationError",
    "Context",
    "HTTPError",
    "HandlerSlots",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "RouteEntry",
    "RouteOptions",
    "RouteRegistry",
    "Unauthorized",
    "VerrouteError",
    "get_context",
    "middleware",
    "user_auth",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import verroute`` fast while providing a clean top-level API.
    """
    if name == "App":
        from verroute.app import App

        return App

    if name == "AppConfig":
        from verroute.config import AppConfig

        return AppConfig

    if name in ("Binding", "HandlerSlots", "RouteOptions"):
        from verroute.routing import binding

        return getattr(binding, name)

    if name == "RouteEntry":
        from verroute.routing.route import RouteEntry

        return RouteEntry

    if name == "RouteRegistry":
        from verroute.routing.registry import RouteRegistry

        return RouteRegistry

    if name in ("Context", "get_context"):
        from verroute import context

        return getattr(context, name)

    if name == "Request":
        from verroute.http.request import Request

        return Request

    if name == "Response":
        from verroute.http.response import Response

        return Response

    if name in ("middleware", "user_auth"):
        from verroute import decorators

        return getattr(decorators, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "Unauthorized",
        "VerrouteError",
    ):
        from verroute import errors

        return getattr(errors, name)

    msg = f"module 'verroute' has no attribute {name!r}"
    raise AttributeError(msg)
