"""Route emitter — expands resolved bindings into RouteEntry lists.

Each filled handler slot produces at most one entry::

    index   GET     /[prefix/]v1/users
    show    GET     /[prefix/]v1/users/:id     (skipped for actions)
    post    POST    /[prefix/]v1/users
    put     PUT     /[prefix/]v1/users/:id     (no :id for actions)
    delete  DELETE  /[prefix/]v1/users/:id     (no :id for actions)
"""

from collections.abc import Mapping

from verroute._internal.types import HTTPMethod
from verroute.routing.binding import Binding
from verroute.routing.route import RouteEntry

# slot -> (method, whether the path carries :id for REST resources)
_SLOT_RULES: dict[str, tuple[HTTPMethod, bool]] = {
    "index": ("get", False),
    "show": ("get", True),
    "post": ("post", False),
    "put": ("put", True),
    "delete": ("delete", True),
}


def path_prefix(prefix: str | None) -> str:
    """Normalize an optional mount prefix to ``"/"`` or ``"/api"``."""
    cleaned = (prefix or "").strip("/")
    return f"/{cleaned}" if cleaned else "/"


def emit_binding(binding: Binding, prefix: str | None = None) -> list[RouteEntry]:
    """Expand one binding into its route entries, in slot order."""
    root = path_prefix(prefix)
    base = f"{root.rstrip('/')}/{binding.version}/{binding.path}"
    treat_as_action = binding.options.treat_as_action

    entries: list[RouteEntry] = []
    for slot, handler in binding.handlers.present():
        method, with_id = _SLOT_RULES[slot]
        if slot == "show" and treat_as_action:
            continue
        path = f"{base}/:id" if with_id and not treat_as_action else base
        entries.append(
            RouteEntry(
                method=method,
                path=path,
                controller=binding.controller,
                handler=handler,
                options=binding.options,
                slot=slot,
                version=binding.version,
            )
        )
    return entries


def emit_routes(
    tables: Mapping[str, Mapping[str, Binding]],
    prefix: str | None = None,
) -> list[RouteEntry]:
    """Emit entries for every version table, in version then path order."""
    entries: list[RouteEntry] = []
    for table in tables.values():
        for binding in table.values():
            entries.extend(emit_binding(binding, prefix))
    return entries
