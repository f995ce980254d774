"""verroute application class.

Mutable during setup (controller registration, hooks, lifecycle hooks).
Frozen at runtime when app.run() or __call__() is first invoked: the
registry is resolved once, its route entries are compiled into the
router, and the registry stops accepting registrations.
"""

import inspect
import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any

from verroute._internal.asgi import Receive, Scope, Send
from verroute._internal.types import Hook, Position, UserAuthInjector
from verroute.config import AppConfig
from verroute.routing.registry import RouteRegistry
from verroute.routing.route import RouteEntry
from verroute.routing.router import Router
from verroute.server.handler import handle_request

logger = logging.getLogger("verroute.app")


class App:
    """The verroute application.

    Usage::

        app = App(config=AppConfig(prefix="api"))

        @app.route("users", "v1")
        class UserController:
            async def index(self, ctx):
                return [{"id": 1}]

    Controller classes are instantiated once, without arguments, when
    the app freezes. Handlers are then called bound to that instance.

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the app.
    """

    __slots__ = (
        "_controllers",
        "_freeze_lock",
        "_frozen",
        "_router",
        "_routes",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
        "registry",
    )

    def __init__(
        self,
        registry: RouteRegistry | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.registry: RouteRegistry = registry if registry is not None else RouteRegistry()
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state — set during _freeze()
        self._router: Router | None = None
        self._routes: tuple[RouteEntry, ...] = ()
        self._controllers: dict[object, object] = {}

    # -- Registration --

    def route(
        self,
        path: str,
        version: str,
        *,
        treat_as_action: bool = False,
        user_auth: UserAuthInjector | None = None,
    ) -> Callable[[type], type]:
        """Register a controller class. See ``RouteRegistry.route``."""
        self._check_not_frozen()
        return self.registry.route(
            path, version, treat_as_action=treat_as_action, user_auth=user_auth
        )

    def add_middleware(
        self,
        controller: object,
        method_name: str,
        funcs: Iterable[Hook],
        position: Position = "before",
    ) -> None:
        """Attach before/after hooks to one controller handler."""
        self._check_not_frozen()
        self.registry.add_middleware(controller, method_name, funcs, position)

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run at ASGI lifespan startup (sync or async)."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run at ASGI lifespan shutdown (sync or async)."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Introspection --

    @property
    def routes(self) -> tuple[RouteEntry, ...]:
        """The emitted route entries. Freezes the app."""
        self._ensure_frozen()
        return self._routes

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with pounce."""
        self._ensure_frozen()

        from verroute.server.dev import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            reload_dirs=self.config.reload_dirs,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._router is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self.registry.middleware,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), then
        runs registered startup/shutdown hooks.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks in registration order."""
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        entries = self.registry.build_routes(self.config.prefix)
        self.registry.freeze()

        router = Router()
        for entry in entries:
            router.add(self._bind(entry))
        router.compile()

        self._routes = tuple(entries)
        self._router = router
        self._frozen = True
        logger.info(
            "Compiled %d routes across %d versions",
            len(entries),
            len({entry.version for entry in entries}),
        )

    def _bind(self, entry: RouteEntry) -> RouteEntry:
        """Return *entry* with its handler bound to the controller instance.

        Handlers read off a controller class are plain functions; they
        are re-read from a shared instance so ``self`` is supplied.
        Explicitly supplied handlers are left untouched.
        """
        controller = entry.controller
        if not isinstance(controller, type):
            return entry
        if getattr(controller, entry.slot, None) is not entry.handler:
            return entry

        instance = self._controllers.get(controller)
        if instance is None:
            instance = controller()
            self._controllers[controller] = instance
        return replace(entry, handler=getattr(instance, entry.slot))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register controllers and hooks before calling app.run()."
            )
            raise RuntimeError(msg)
