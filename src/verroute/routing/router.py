"""Compiled router with trie-based path matching.

Route entries are added once the registry has been resolved and
compiled into an immutable lookup structure when the app freezes.
"""

from verroute.errors import ConfigurationError, MethodNotAllowed, NotFound
from verroute.routing.route import PathSegment, RouteEntry, RouteMatch


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path template into segments.

    Examples::

        "/v1/users"      -> [PathSegment("v1"), PathSegment("users")]
        "/v1/users/:id"  -> [..., PathSegment(":id", is_param=True, param_name="id")]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith(":") and len(part) > 1:
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:]))
        else:
            segments.append(PathSegment(value=part))
    return segments


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "param_child", "routes_by_method")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param name per level)
        self.param_child: tuple[str, _TrieNode] | None = None
        # Routes at this node, keyed by upper-case HTTP method
        self.routes_by_method: dict[str, RouteEntry] = {}


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        for entry in registry.build_routes():
            router.add(entry)
        router.compile()
        match = router.match("GET", "/v1/users/42")
        match.path_params  # {"id": "42"}
    """

    __slots__ = ("_compiled", "_root")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False

    def add(self, route: RouteEntry) -> None:
        """Add a route entry. Must be called before compile().

        A later entry for the same method and path replaces the earlier.
        Raises ``ConfigurationError`` when a parameter segment is named
        differently from one already added at the same position.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if seg.is_param:
                name = seg.param_name or ""
                if node.param_child is None:
                    node.param_child = (name, _TrieNode())
                elif node.param_child[0] != name:
                    msg = (
                        f"Route {route.path!r} names parameter {name!r} where another "
                        f"route at the same position uses {node.param_child[0]!r}."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child[1]
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        node.routes_by_method[route.method.upper()] = route

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        method = method.upper()
        parts = [p for p in path.strip("/").split("/") if p]
        result = self._match_node(self._root, parts, 0, {})

        if result is None:
            raise NotFound(f"No route matches {method} {path!r}")

        node, params = result
        if method in node.routes_by_method:
            return RouteMatch(route=node.routes_by_method[method], path_params=params)

        raise MethodNotAllowed(frozenset(node.routes_by_method))

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[_TrieNode, dict[str, str]] | None:
        """Recursively match path parts against the trie."""
        # All parts consumed — return this node
        if index == len(parts):
            if node.routes_by_method:
                return node, params
            return None

        part = parts[index]

        # 1. Try static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        if node.param_child is not None:
            name, child = node.param_child
            new_params = {**params, name: part}
            return self._match_node(child, parts, index + 1, new_params)

        return None
