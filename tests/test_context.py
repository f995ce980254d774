"""Tests for verroute.context — per-request Context and ContextVar."""

import pytest

from verroute.context import Context, context_var, get_context
from verroute.http.headers import Headers
from verroute.http.request import Request


async def _receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


def _ctx() -> Context:
    request = Request(
        method="GET",
        path="/",
        headers=Headers(),
        query={},
        http_version="1.1",
        client=None,
        _receive=_receive,
    )
    return Context(request=request)


class TestContext:
    def test_defaults(self) -> None:
        ctx = _ctx()
        assert ctx.params == {}
        assert ctx.user is None
        assert ctx.response is None
        assert ctx.state == {}

    def test_state_not_shared(self) -> None:
        first, second = _ctx(), _ctx()
        first.state["k"] = 1
        assert second.state == {}

    def test_get_context(self) -> None:
        ctx = _ctx()
        token = context_var.set(ctx)
        try:
            assert get_context() is ctx
        finally:
            context_var.reset(token)

    def test_get_context_outside_request(self) -> None:
        with pytest.raises(LookupError):
            get_context()
