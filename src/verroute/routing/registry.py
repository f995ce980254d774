"""Route registry — the binding store behind ``build_routes()``.

An explicit object, created at process start, filled during the
registration phase, and frozen once the app has resolved its routes.
Registration never interleaves with serving traffic.
"""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from verroute._internal.types import Hook, Position, UserAuthInjector
from verroute.decorators import middleware_marks, user_auth_mark
from verroute.errors import ConfigurationError
from verroute.routing.binding import Binding, HandlerSlots, RouteOptions
from verroute.routing.emitter import emit_routes
from verroute.routing.middleware import MiddlewareMap
from verroute.routing.resolver import VersionTable, resolve_versions
from verroute.routing.route import RouteEntry
from verroute.versioning import is_valid_version

logger = logging.getLogger("verroute.registry")

C = TypeVar("C", bound=type)


class RouteRegistry:
    """Append-only store of controller bindings.

    Usage::

        registry = RouteRegistry()

        @registry.route("posts", "v1")
        class PostController:
            async def index(self, ctx): ...
            async def show(self, ctx): ...

        registry.build_routes("api")
        # [RouteEntry(method="get", path="/api/v1/posts", ...),
        #  RouteEntry(method="get", path="/api/v1/posts/:id", ...)]
    """

    __slots__ = ("_bindings", "_frozen", "_middleware")

    def __init__(self) -> None:
        self._bindings: list[Binding] = []
        self._middleware = MiddlewareMap()
        self._frozen = False

    # -- Registration --

    def register_route(
        self,
        path: str,
        version: str,
        controller: object,
        options: RouteOptions | None = None,
        *,
        handlers: HandlerSlots | None = None,
    ) -> Binding | None:
        """Append a binding for *controller* at ``version/path``.

        An invalid *version* is silently dropped: nothing is stored and
        ``None`` is returned. Registering the same path twice under one
        version is allowed; the later binding wins at resolution time.
        """
        self._check_not_frozen()
        if not is_valid_version(version):
            logger.debug("Dropping %r: invalid version %r", path, version)
            return None

        binding = Binding(
            version=version,
            path=path,
            controller=controller,
            handlers=handlers if handlers is not None else HandlerSlots.from_controller(controller),
            options=options or RouteOptions(),
        )
        self._bindings.append(binding)
        logger.debug(
            "Registered %s/%s -> %s",
            version,
            path,
            getattr(controller, "__name__", type(controller).__name__),
        )
        return binding

    def route(
        self,
        path: str,
        version: str,
        *,
        treat_as_action: bool = False,
        user_auth: UserAuthInjector | None = None,
    ) -> Callable[[C], C]:
        """Class decorator form of ``register_route``.

        Picks up ``@user_auth`` on the class (when *user_auth* is not
        given) and ``@middleware`` on its handler slots.
        """

        def decorator(cls: C) -> C:
            options = RouteOptions(
                treat_as_action=treat_as_action,
                user_auth=user_auth if user_auth is not None else user_auth_mark(cls),
            )
            binding = self.register_route(path, version, cls, options)
            if binding is not None:
                for slot, handler in binding.handlers.present():
                    for position, hooks in middleware_marks(handler).items():
                        self._middleware.add(cls, slot, hooks, position)  # type: ignore[arg-type]
            return cls

        return decorator

    def add_middleware(
        self,
        controller: object,
        method_name: str,
        funcs: Iterable[Hook],
        position: Position = "before",
    ) -> None:
        """Attach hooks to one controller handler."""
        self._check_not_frozen()
        self._middleware.add(controller, method_name, funcs, position)

    # -- Introspection --

    @property
    def bindings(self) -> tuple[Binding, ...]:
        """All bindings in registration order."""
        return tuple(self._bindings)

    @property
    def middleware(self) -> MiddlewareMap:
        return self._middleware

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._bindings)

    # -- Resolution --

    def resolve(self) -> VersionTable:
        """Resolve every version to its ``path -> Binding`` table."""
        return resolve_versions(self._bindings)

    def build_routes(self, prefix: str | None = None) -> list[RouteEntry]:
        """Resolve inheritance and emit the route entries.

        *prefix* is mounted ahead of the version segment
        (``/prefix/v1/users``). Calling this repeatedly without new
        registrations yields identical output.
        """
        return emit_routes(self.resolve(), prefix)

    def freeze(self) -> None:
        """Reject further registrations."""
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot register routes after the registry has been frozen. "
                "Register all controllers before the app serves requests."
            )
            raise ConfigurationError(msg)
