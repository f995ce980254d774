"""Tests for verroute.routing.registry — registration and build_routes()."""

import pytest

from conftest import PostController, UserControllerV1, UserControllerV2
from verroute.decorators import middleware, user_auth
from verroute.errors import ConfigurationError
from verroute.routing.binding import HandlerSlots, RouteOptions
from verroute.routing.registry import RouteRegistry


def _by_version(entries, version: str) -> list[tuple[str, str]]:
    return [(e.method, e.path) for e in entries if e.version == version]


class TestRegisterRoute:
    def test_appends_binding(self) -> None:
        reg = RouteRegistry()
        binding = reg.register_route("posts", "v1", PostController)

        assert binding is not None
        assert reg.bindings == (binding,)
        assert len(reg) == 1
        assert binding.handlers.index is PostController.index

    def test_invalid_version_is_dropped(self) -> None:
        reg = RouteRegistry()
        assert reg.register_route("posts", "1", PostController) is None
        assert reg.register_route("posts", "version2", PostController) is None
        assert len(reg) == 0
        assert reg.build_routes() == []

    def test_explicit_handlers(self) -> None:
        reg = RouteRegistry()
        binding = reg.register_route(
            "users",
            "v2",
            UserControllerV2,
            handlers=HandlerSlots(index=UserControllerV2.index),
        )
        assert binding is not None
        assert [name for name, _ in binding.handlers.present()] == ["index"]

    def test_options_default(self) -> None:
        reg = RouteRegistry()
        binding = reg.register_route("posts", "v1", PostController)
        assert binding is not None
        assert binding.options == RouteOptions()

    def test_frozen_rejects(self) -> None:
        reg = RouteRegistry()
        reg.freeze()
        assert reg.frozen is True
        with pytest.raises(ConfigurationError):
            reg.register_route("posts", "v1", PostController)
        with pytest.raises(ConfigurationError):
            reg.add_middleware(PostController, "index", [])


class TestRouteDecorator:
    def test_registers_class(self) -> None:
        reg = RouteRegistry()

        @reg.route("things", "v1", treat_as_action=True)
        class ThingController:
            def put(self, ctx):
                return "put"

        (binding,) = reg.bindings
        assert binding.controller is ThingController
        assert binding.options.treat_as_action is True
        assert [(e.method, e.path) for e in reg.build_routes()] == [("put", "/v1/things")]

    def test_returns_class_unchanged_for_invalid_version(self) -> None:
        reg = RouteRegistry()

        @reg.route("things", "latest")
        class ThingController:
            def index(self, ctx):
                return "index"

        assert ThingController.__name__ == "ThingController"
        assert len(reg) == 0

    def test_picks_up_user_auth_marker(self) -> None:
        reg = RouteRegistry()

        def injector(ctx):
            return "alice"

        @reg.route("things", "v1")
        @user_auth(injector)
        class ThingController:
            def index(self, ctx):
                return "index"

        assert reg.bindings[0].options.user_auth is injector

    def test_explicit_user_auth_wins(self) -> None:
        reg = RouteRegistry()

        def marked(ctx):
            return "marked"

        def explicit(ctx):
            return "explicit"

        @reg.route("things", "v1", user_auth=explicit)
        @user_auth(marked)
        class ThingController:
            def index(self, ctx):
                return "index"

        assert reg.bindings[0].options.user_auth is explicit

    def test_copies_middleware_markers(self) -> None:
        reg = RouteRegistry()

        def audit(ctx):
            return None

        def stamp(ctx):
            return None

        @reg.route("things", "v1")
        class ThingController:
            @middleware([audit])
            @middleware([stamp], position="after")
            def index(self, ctx):
                return "index"

            def show(self, ctx):
                return "show"

        hooks = reg.middleware.get(ThingController, "index")
        assert hooks.before == (audit,)
        assert hooks.after == (stamp,)
        assert not reg.middleware.get(ThingController, "show")


class TestBuildRoutes:
    def test_inheritance(self) -> None:
        reg = RouteRegistry()
        reg.register_route("x", "v1", PostController, handlers=HandlerSlots(index=PostController.index))
        reg.register_route("y", "v2", PostController, handlers=HandlerSlots(index=PostController.index))

        assert ("get", "/v2/x") in _by_version(reg.build_routes(), "v2")

    def test_override(self, registry: RouteRegistry) -> None:
        entries = [e for e in registry.build_routes() if e.version == "v2" and e.slot == "index"]
        users = next(e for e in entries if e.path == "/v2/users")
        assert users.handler is UserControllerV2.index
        assert users.controller is UserControllerV2

    def test_no_predecessor(self) -> None:
        reg = RouteRegistry()
        reg.register_route("only", "v1", UserControllerV1)
        assert {e.path.split("/")[2] for e in reg.build_routes()} == {"only"}

    def test_treat_as_action(self) -> None:
        reg = RouteRegistry()
        slots = HandlerSlots(show=UserControllerV1.show, put=UserControllerV1.put)
        reg.register_route("act", "v1", UserControllerV1, RouteOptions(treat_as_action=True), handlers=slots)
        reg.register_route("rest", "v1", UserControllerV1, handlers=slots)

        assert _by_version(reg.build_routes(), "v1") == [
            ("get", "/v1/rest/:id"),
            ("put", "/v1/rest/:id"),
            ("put", "/v1/act"),
        ]

    def test_idempotent(self, registry: RouteRegistry) -> None:
        assert registry.build_routes() == registry.build_routes()
        assert registry.build_routes("api") == registry.build_routes("api")

    def test_prefix(self, registry: RouteRegistry) -> None:
        assert all(e.path.startswith("/api/v") for e in registry.build_routes("api"))
        assert all(e.path.startswith("/v") for e in registry.build_routes())

    def test_end_to_end_posts_and_users(self) -> None:
        """posts in v1 (all five slots), users only in v2 (index + show)."""
        reg = RouteRegistry()
        reg.register_route("posts", "v1", PostController)
        reg.register_route(
            "users",
            "v2",
            UserControllerV2,
            handlers=HandlerSlots(index=UserControllerV2.index, show=UserControllerV2.show),
        )

        entries = reg.build_routes()

        assert _by_version(entries, "v1") == [
            ("get", "/v1/posts"),
            ("get", "/v1/posts/:id"),
            ("post", "/v1/posts"),
            ("put", "/v1/posts/:id"),
            ("delete", "/v1/posts/:id"),
        ]
        assert _by_version(entries, "v2") == [
            ("get", "/v2/posts"),
            ("get", "/v2/posts/:id"),
            ("post", "/v2/posts"),
            ("put", "/v2/posts/:id"),
            ("delete", "/v2/posts/:id"),
            ("get", "/v2/users"),
            ("get", "/v2/users/:id"),
        ]
        inherited = [e for e in entries if e.version == "v2" and "/posts" in e.path]
        assert all(e.controller is PostController for e in inherited)

    def test_resolve_exposes_tables(self, registry: RouteRegistry) -> None:
        tables = registry.resolve()
        assert list(tables) == ["v1", "v2"]
        assert list(tables["v1"]) == ["users", "posts"]
        assert tables["v2"]["posts"].version == "v2"
