"""App import resolution — resolves ``"module:attribute"`` strings to Apps.

Shared by ``verroute routes`` and ``verroute run``.
"""

import importlib

from verroute.app import App
from verroute.routing.registry import RouteRegistry


def resolve_app(import_string: str) -> App:
    """Resolve an import string to a verroute App.

    Accepts ``"module:attribute"``; the attribute defaults to ``"app"``.
    A resolved ``RouteRegistry`` is wrapped in a default ``App``.
    Callables that are neither (app factories) are called first.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an App or RouteRegistry.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (App, RouteRegistry)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteRegistry):
        return App(registry=obj)

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a verroute.App instance"
        raise TypeError(msg)

    return obj
