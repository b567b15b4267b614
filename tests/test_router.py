"""Tests for restify.routing.router — registration and the routing middleware."""

import logging

import pytest

from restify.config import RouterConfig
from restify.context import Context
from restify.errors import ConfigurationError, InvalidPatternError, UnsupportedMethodError
from restify.http.request import Request
from restify.routing.router import RestifyRouter


def _ctx(method: str, path: str) -> Context:
    return Context(req=Request(method=method, path=path))


async def _end() -> str:
    return "next"


class TestConstruction:
    def test_defaults(self) -> None:
        router = RestifyRouter()
        assert router._prefix == ""
        assert len(router) == 0

    def test_prefix_keyword(self) -> None:
        router = RestifyRouter(prefix="/1700000000")
        assert router._prefix == "/1700000000"

    def test_prefix_from_config(self) -> None:
        router = RestifyRouter(RouterConfig(prefix="/api"))
        assert router._prefix == "/api"

    def test_keyword_overrides_config(self) -> None:
        router = RestifyRouter(RouterConfig(prefix="/api"), prefix="/v2")
        assert router._prefix == "/v2"

    def test_repr(self) -> None:
        assert repr(RestifyRouter(prefix="/p")) == "RestifyRouter(prefix='/p', routes=0)"


class TestRegistration:
    def test_verbs_register_single_method(self) -> None:
        router = RestifyRouter()
        verbs = ("get", "head", "post", "put", "delete", "options", "patch")
        for verb in verbs:
            getattr(router, verb)(f"/{verb}", lambda ctx, next: None)

        methods = [next(iter(route.methods)) for route in router.route_table]
        assert methods == [v.upper() for v in verbs]

    def test_no_connect_or_trace_helpers(self) -> None:
        router = RestifyRouter()
        assert not hasattr(router, "connect")
        assert not hasattr(router, "trace")

    def test_add_route_accepts_connect(self) -> None:
        router = RestifyRouter().add_route("CONNECT", "/tunnel", lambda ctx, next: None)
        assert router.route_table[0].methods == frozenset({"CONNECT"})

    def test_add_route_with_method_list(self) -> None:
        router = RestifyRouter().add_route(["GET", "post"], "/x", lambda ctx, next: None)
        assert router.route_table[0].methods == frozenset({"GET", "POST"})

    def test_fluent_chaining(self) -> None:
        router = RestifyRouter()
        returned = router.get("/", lambda ctx, next: None).post("/", lambda ctx, next: None)
        assert returned is router
        assert len(router) == 2

    def test_decorator_form(self) -> None:
        router = RestifyRouter()

        @router.get("/items/:id")
        def show(ctx, next):
            return ctx.req.slugs["id"]

        assert router.route_table[0].handler is show

    def test_unknown_method(self) -> None:
        with pytest.raises(UnsupportedMethodError):
            RestifyRouter().add_route("FETCH", "/", lambda ctx, next: None)

    def test_empty_methods(self) -> None:
        with pytest.raises(ConfigurationError):
            RestifyRouter().add_route([], "/", lambda ctx, next: None)

    def test_invalid_template_aborts(self) -> None:
        router = RestifyRouter()
        with pytest.raises(InvalidPatternError):
            router.get("no-slash", lambda ctx, next: None)
        assert len(router) == 0

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="restify.routing"):
            RestifyRouter().add_route(["POST", "GET"], "/x", lambda ctx, next: None)
        assert "Registered GET|POST /x" in caplog.text


class TestPrefix:
    def test_prefix_is_concatenated(self) -> None:
        router = RestifyRouter(prefix="/api").get("/users", lambda ctx, next: None)
        assert router.route_table[0].raw_template == "/api/users"

    def test_prefix_is_not_retroactive(self) -> None:
        router = RestifyRouter()
        router.get("/a", lambda ctx, next: None)
        router.prefix("/v1").get("/b", lambda ctx, next: None)
        assert [r.raw_template for r in router.route_table] == ["/a", "/v1/b"]

    def test_prefix_returns_router(self) -> None:
        router = RestifyRouter()
        assert router.prefix("/x") is router

    def test_prefix_reset(self) -> None:
        router = RestifyRouter(prefix="/x")
        router.prefix(None).get("/a", lambda ctx, next: None)
        assert router.route_table[0].raw_template == "/a"

    def test_no_separator_normalization(self) -> None:
        router = RestifyRouter(prefix="/api").get("users", lambda ctx, next: None)
        assert router.route_table[0].raw_template == "/apiusers"


class TestInclude:
    def test_include_appends_in_order(self) -> None:
        a = RestifyRouter(prefix="/a").get("/1", lambda ctx, next: None)
        b = RestifyRouter(prefix="/b").get("/2", lambda ctx, next: None)
        top = RestifyRouter().get("/", lambda ctx, next: None).include(a, b)
        assert [r.raw_template for r in top.route_table] == ["/", "/a/1", "/b/2"]


class TestRoutesMiddleware:
    @pytest.mark.anyio
    async def test_returns_handler_result(self) -> None:
        router = RestifyRouter()

        async def handler(ctx, next):
            return 1700000000

        router.get("/test", handler)
        result = await router.routes()(_ctx("GET", "/test"), None)
        assert result == 1700000000

    @pytest.mark.anyio
    async def test_sync_handler(self) -> None:
        router = RestifyRouter().get("/", lambda ctx, next: "Hi, world!")
        assert await router.routes()(_ctx("GET", "/"), _end) == "Hi, world!"

    @pytest.mark.anyio
    async def test_no_match_calls_next(self) -> None:
        router = RestifyRouter().get("/a", lambda ctx, next: "a")
        ctx = _ctx("GET", "/b")
        assert await router.routes()(ctx, _end) == "next"
        assert "matched_route" not in ctx.state
        assert ctx.res.status == 404

    @pytest.mark.anyio
    async def test_sync_next(self) -> None:
        router = RestifyRouter()
        assert await router.routes()(_ctx("GET", "/"), lambda: "sync") == "sync"

    @pytest.mark.anyio
    async def test_records_match_and_slugs(self) -> None:
        router = RestifyRouter().put("/{id}", lambda ctx, next: ctx.req.slugs["id"])
        ctx = _ctx("PUT", "/42")
        assert await router.routes()(ctx, _end) == "42"
        assert ctx.req.slugs == {"id": "42"}
        match = ctx.state["matched_route"]
        assert match.route.raw_template == "/{id}"
        assert match.methods == frozenset({"PUT"})

    @pytest.mark.anyio
    async def test_resets_404_to_200(self) -> None:
        router = RestifyRouter().get("/", lambda ctx, next: None)
        ctx = _ctx("GET", "/")
        await router.routes()(ctx, _end)
        assert ctx.res.status == 200

    @pytest.mark.anyio
    async def test_keeps_non_404_status(self) -> None:
        router = RestifyRouter().get("/", lambda ctx, next: None)
        ctx = _ctx("GET", "/")
        ctx.res.status = 201
        await router.routes()(ctx, _end)
        assert ctx.res.status == 201

    @pytest.mark.anyio
    async def test_handler_can_call_next(self) -> None:
        async def handler(ctx, next):
            return f"before {await next()}"

        router = RestifyRouter().get("/", handler)
        assert await router.routes()(_ctx("GET", "/"), _end) == "before next"

    @pytest.mark.anyio
    async def test_handler_errors_propagate(self) -> None:
        def handler(ctx, next):
            raise ValueError("boom")

        router = RestifyRouter().get("/", handler)
        with pytest.raises(ValueError, match="boom"):
            await router.routes()(_ctx("GET", "/"), _end)

    @pytest.mark.anyio
    async def test_records_path_methods_on_method_miss(self) -> None:
        router = RestifyRouter().get("/x", lambda ctx, next: None).put("/:id", lambda ctx, next: None)
        ctx = _ctx("POST", "/x")
        await router.routes()(ctx, _end)
        assert ctx.state["path_methods"] == frozenset({"GET", "PUT"})

    @pytest.mark.anyio
    async def test_sees_routes_added_later(self) -> None:
        router = RestifyRouter()
        middleware = router.routes()
        router.get("/late", lambda ctx, next: "late")
        assert await middleware(_ctx("GET", "/late"), _end) == "late"


class TestControllers:
    def test_registers_with_prefix(self) -> None:
        controller = {
            "GET /users": lambda ctx, next: "list",
            "POST|PUT /users/:id": lambda ctx, next: "save",
        }
        router = RestifyRouter(prefix="/api").controllers(controller)
        table = router.route_table
        assert [r.raw_template for r in table] == ["/api/users", "/api/users/:id"]
        assert table[1].methods == frozenset({"POST", "PUT"})
