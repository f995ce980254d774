"""Shared controllers and registries for the verroute test suite."""

import pytest

from verroute.context import Context
from verroute.http.response import Response
from verroute.routing.registry import RouteRegistry


class PostController:
    """v1 posts — fills every REST slot."""

    async def index(self, ctx: Context) -> None:
        ctx.response = Response.json({"message": "post-controller-index-v1"})

    async def show(self, ctx: Context) -> None:
        ctx.response = Response.json({"message": "post-controller-show-v1", "id": ctx.params["id"]})

    async def post(self, ctx: Context) -> None:
        ctx.response = Response.json({"message": "post-controller-post-v1"}, status=201)

    async def put(self, ctx: Context) -> None:
        ctx.response = Response.json({"message": "post-controller-put-v1"})

    async def delete(self, ctx: Context) -> None:
        ctx.response = Response.json({"message": "post-controller-delete-v1"})


class UserControllerV1:
    async def index(self, ctx: Context) -> dict[str, str]:
        return {"message": "user-controller-index-v1"}

    async def show(self, ctx: Context) -> dict[str, str]:
        return {"message": "user-controller-show-v1"}

    async def put(self, ctx: Context) -> dict[str, str]:
        return {"message": "user-controller-put-v1"}


class UserControllerV2(UserControllerV1):
    async def index(self, ctx: Context) -> dict[str, str]:
        return {"message": "user-controller-index-v2"}

    async def show(self, ctx: Context) -> dict[str, str]:
        return {"message": "user-controller-show-v2"}


@pytest.fixture
def registry() -> RouteRegistry:
    """A registry with posts in v1 and users in v1 and v2."""
    reg = RouteRegistry()
    reg.register_route("posts", "v1", PostController)
    reg.register_route("users", "v1", UserControllerV1)
    reg.register_route("users", "v2", UserControllerV2)
    return reg
