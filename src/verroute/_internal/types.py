"""Shared type aliases used across verroute modules."""

from collections.abc import Callable
from typing import Any, Literal, TypeAlias

# Controller handler slot — receives a Context and returns a response value
Handler: TypeAlias = Callable[..., Any]

# Per-route hook run before or after a handler — receives a Context
Hook: TypeAlias = Callable[..., Any]

# Authenticates a request — receives a Context, returns a user or None
UserAuthInjector: TypeAlias = Callable[..., Any]

HTTPMethod: TypeAlias = Literal["get", "post", "put", "delete"]

Position: TypeAlias = Literal["before", "after"]
