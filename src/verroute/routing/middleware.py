"""Per-route hook lists keyed by (controller, handler slot).

Hooks run around a single controller handler, unlike app-wide
middleware. ``before`` hooks run in order ahead of the handler and may
short-circuit by returning a Response; ``after`` hooks run in order once
the handler has produced ``ctx.response``.

A v2 controller never falls back to the hooks of the controller it
extends. Register hooks against each controller that needs them.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from verroute._internal.types import Hook, Position
from verroute.errors import ConfigurationError

POSITIONS: tuple[str, ...] = ("before", "after")


@dataclass(frozen=True, slots=True)
class MiddlewareLists:
    """Ordered hooks for one controller handler."""

    before: tuple[Hook, ...] = ()
    after: tuple[Hook, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.before or self.after)


_EMPTY = MiddlewareLists()


class MiddlewareMap:
    """Mapping of ``(controller, method_name)`` to ``MiddlewareLists``.

    Usage::

        hooks = MiddlewareMap()
        hooks.add(UserController, "index", [audit], position="after")
        hooks.get(UserController, "index").after  # (audit,)
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[tuple[object, str], MiddlewareLists] = {}

    def add(
        self,
        controller: object,
        method_name: str,
        funcs: Iterable[Hook],
        position: Position = "before",
    ) -> None:
        """Set the hook list for one position.

        Adding the same position twice replaces the earlier list.
        Raises ``ConfigurationError`` for an unknown *position*.
        """
        if position not in POSITIONS:
            msg = f"Unknown middleware position {position!r}. Expected 'before' or 'after'."
            raise ConfigurationError(msg)

        key = (controller, method_name)
        current = self._entries.get(key, _EMPTY)
        hooks = tuple(funcs)
        if position == "before":
            self._entries[key] = MiddlewareLists(before=hooks, after=current.after)
        else:
            self._entries[key] = MiddlewareLists(before=current.before, after=hooks)

    def get(self, controller: object, method_name: str) -> MiddlewareLists:
        """Return the hooks for a handler, empty when none were registered."""
        return self._entries.get((controller, method_name), _EMPTY)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
