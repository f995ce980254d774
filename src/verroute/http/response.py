"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Usage::

        Response.json({"id": 1}, status=201).with_header("Location", "/v1/users/1")
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(cls, data: Any, status: int = 200) -> Response:
        """Serialize *data* as a JSON response."""
        return cls(
            body=json_module.dumps(data, default=str),
            status=status,
            content_type="application/json",
        )

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str) -> str | None:
        """Return the first value of response header *name*, if set."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def body_bytes(self) -> bytes:
        """The body encoded as bytes."""
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    @property
    def text(self) -> str:
        """The body decoded as UTF-8 text."""
        if isinstance(self.body, str):
            return self.body
        return self.body.decode("utf-8")

    def json_body(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.body_bytes)
