"""verroute exception hierarchy.

Shared across the registry, router, app, and request pipeline so every
module raises and catches the same types. The route-table core itself
(resolver and emitter) never raises.
"""

from dataclasses import dataclass


class VerrouteError(Exception):
    """Base for all verroute-specific errors."""


class ConfigurationError(VerrouteError):
    """Raised when the registry or app is configured incorrectly.

    Typically raised while registering against a frozen registry, or for
    an unknown middleware position.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(VerrouteError):
    """An error that maps directly to an HTTP status code.

    Raised by the router, auth injectors, hooks, or handlers. The ASGI
    handler catches these and renders a JSON error body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class Unauthorized(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """401 — the controller's user-auth injector rejected the request."""

    def __init__(self, detail: str = "Unauthorized") -> None:
        super().__init__(status=401, detail=detail)
