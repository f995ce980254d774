"""RouteEntry, PathSegment, and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from verroute._internal.types import Handler, HTTPMethod
from verroute.routing.binding import RouteOptions


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/:id``    (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One emitted route, ready for HTTP dispatch.

    ``controller``, ``handler`` and ``options`` are carried unchanged
    from the Binding that produced the entry.
    """

    method: HTTPMethod
    path: str
    controller: object
    handler: Handler
    options: RouteOptions
    slot: str = ""
    version: str = ""


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: RouteEntry
    path_params: dict[str, str]
