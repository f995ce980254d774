"""Tests for verroute.routing.binding — Binding, HandlerSlots, RouteOptions."""

import pytest

from verroute.routing.binding import SLOT_NAMES, Binding, HandlerSlots, RouteOptions


def _handler() -> str:
    return "ok"


class _OnlyIndex:
    def index(self, ctx):
        return "index"

    show = "not callable"


class _Child(_OnlyIndex):
    def delete(self, ctx):
        return "delete"


class TestHandlerSlots:
    def test_empty_by_default(self) -> None:
        assert list(HandlerSlots().present()) == []

    def test_from_controller_reads_callables(self) -> None:
        slots = HandlerSlots.from_controller(_OnlyIndex)
        assert slots.index is _OnlyIndex.index
        assert slots.show is None
        assert slots.post is None

    def test_from_controller_includes_inherited(self) -> None:
        slots = HandlerSlots.from_controller(_Child)
        assert slots.index is _OnlyIndex.index
        assert slots.delete is _Child.delete

    def test_from_instance_binds_methods(self) -> None:
        instance = _OnlyIndex()
        slots = HandlerSlots.from_controller(instance)
        assert slots.index is not None
        assert slots.index(None) == "index"

    def test_present_follows_slot_order(self) -> None:
        slots = HandlerSlots(delete=_handler, index=_handler, put=_handler)
        assert [name for name, _ in slots.present()] == ["index", "put", "delete"]

    def test_slot_names(self) -> None:
        assert SLOT_NAMES == ("index", "show", "post", "put", "delete")

    def test_frozen(self) -> None:
        slots = HandlerSlots()
        with pytest.raises(AttributeError):
            slots.index = _handler  # type: ignore[misc]


class TestRouteOptions:
    def test_defaults(self) -> None:
        options = RouteOptions()
        assert options.treat_as_action is False
        assert options.user_auth is None


class TestBinding:
    def test_defaults(self) -> None:
        binding = Binding(version="v1", path="users", controller=_OnlyIndex)
        assert binding.handlers == HandlerSlots()
        assert binding.options == RouteOptions()

    def test_with_version_relabels_copy(self) -> None:
        original = Binding(
            version="v1",
            path="users",
            controller=_OnlyIndex,
            handlers=HandlerSlots(index=_handler),
        )
        copy = original.with_version("v2")

        assert copy.version == "v2"
        assert original.version == "v1"
        assert copy.path == "users"
        assert copy.controller is _OnlyIndex
        assert copy.handlers.index is _handler

    def test_frozen(self) -> None:
        binding = Binding(version="v1", path="users", controller=_OnlyIndex)
        with pytest.raises(AttributeError):
            binding.version = "v2"  # type: ignore[misc]
