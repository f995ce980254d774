"""Binding, HandlerSlots, and RouteOptions frozen dataclasses.

A Binding is one controller registration: a resource path under an API
version, plus which of the five REST handler slots the controller fills.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from verroute._internal.types import Handler, UserAuthInjector

SLOT_NAMES: tuple[str, ...] = ("index", "show", "post", "put", "delete")
"""Handler slots in emission order."""


@dataclass(frozen=True, slots=True)
class HandlerSlots:
    """The five REST handler slots of a controller.

    ``None`` means the slot is absent and produces no route.
    """

    index: Handler | None = None
    show: Handler | None = None
    post: Handler | None = None
    put: Handler | None = None
    delete: Handler | None = None

    @classmethod
    def from_controller(cls, controller: object) -> HandlerSlots:
        """Read the slot attributes off a controller class or instance.

        Missing or non-callable attributes are treated as absent. Methods
        inherited from a base controller count as present.
        """
        found: dict[str, Handler] = {}
        for name in SLOT_NAMES:
            value = getattr(controller, name, None)
            if callable(value):
                found[name] = value
        return cls(**found)

    def present(self) -> Iterator[tuple[str, Handler]]:
        """Yield ``(slot_name, handler)`` for every filled slot, in slot order."""
        for name in SLOT_NAMES:
            handler = getattr(self, name)
            if handler is not None:
                yield name, handler


@dataclass(frozen=True, slots=True)
class RouteOptions:
    """Per-registration options.

    ``treat_as_action`` turns a REST resource into an action endpoint:
    no ``show`` route, and ``put``/``delete`` drop the ``:id`` suffix.
    """

    treat_as_action: bool = False
    user_auth: UserAuthInjector | None = None


@dataclass(frozen=True, slots=True)
class Binding:
    """A controller registered under ``version`` at ``path``."""

    version: str
    path: str
    controller: object
    handlers: HandlerSlots = field(default_factory=HandlerSlots)
    options: RouteOptions = field(default_factory=RouteOptions)

    def with_version(self, version: str) -> Binding:
        """Return a copy of this binding relabelled to *version*."""
        return replace(self, version=version)
