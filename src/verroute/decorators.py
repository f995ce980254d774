"""Controller decorators — ``@middleware`` and ``@user_auth``.

Both decorators only *mark* their target. Nothing is registered until
the class passes through ``registry.route(...)``, which reads the
markers once and records them in that registry. There is no global
metadata store.

Usage::

    registry = RouteRegistry()

    @registry.route("users", "v1")
    @user_auth(load_user)
    class UserController:
        @middleware([require_json], position="before")
        async def post(self, ctx): ...

Decorators apply bottom-up, so ``@user_auth`` must sit below
``@registry.route`` to be seen by it.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from verroute._internal.types import Hook, Position, UserAuthInjector
from verroute.errors import ConfigurationError
from verroute.routing.middleware import POSITIONS

_log = logging.getLogger("verroute.registry")

MIDDLEWARE_ATTR = "__verroute_middleware__"
USER_AUTH_ATTR = "__verroute_user_auth__"

F = TypeVar("F", bound=Callable[..., Any])
C = TypeVar("C", bound=type)


def middleware(funcs: Iterable[Hook], position: Position = "before") -> Callable[[F], F]:
    """Attach before/after hooks to a controller handler.

    Applying the decorator twice with the same position replaces the
    earlier list; ``before`` and ``after`` are kept separately.
    """
    if position not in POSITIONS:
        msg = f"Unknown middleware position {position!r}. Expected 'before' or 'after'."
        raise ConfigurationError(msg)
    hooks = tuple(funcs)

    def decorator(func: F) -> F:
        _log.debug(
            "middleware: %s %s=[%s]",
            getattr(func, "__qualname__", func),
            position,
            ",".join(getattr(h, "__name__", repr(h)) for h in hooks),
        )
        marks: dict[str, tuple[Hook, ...]] = dict(getattr(func, MIDDLEWARE_ATTR, {}))
        marks[position] = hooks
        setattr(func, MIDDLEWARE_ATTR, marks)
        return func

    return decorator


def user_auth(injector: UserAuthInjector) -> Callable[[C], C]:
    """Mark a controller class with the injector that authenticates its requests."""

    def decorator(cls: C) -> C:
        # own attribute only, a subclass must opt in itself
        setattr(cls, USER_AUTH_ATTR, injector)
        return cls

    return decorator


def middleware_marks(func: object) -> dict[str, tuple[Hook, ...]]:
    """Return the hooks marked on *func* by ``@middleware``, keyed by position."""
    return dict(getattr(func, MIDDLEWARE_ATTR, {}))


def user_auth_mark(controller: object) -> UserAuthInjector | None:
    """Return the injector set by ``@user_auth`` directly on *controller*."""
    cls = controller if isinstance(controller, type) else type(controller)
    return cls.__dict__.get(USER_AUTH_ATTR)
