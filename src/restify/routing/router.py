"""RestifyRouter — fluent route registration and the routing middleware.

Routes are registered during setup and matched per request::

    router = (
        RestifyRouter(prefix="/product")
        .get("/", lambda ctx, next: "Hi, world!")
        .post("/", lambda ctx, next: ctx.req.json())
        .put("/{id}", lambda ctx, next: ctx.req.slugs["id"])
        .delete("/:id", lambda ctx, next: ctx.req.slugs["id"])
    )

    app.add_middleware(router.routes())
    app.add_middleware(router.allowed_methods())
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from restify._internal.invoke import invoke
from restify.config import AllowedMethodsConfig, RouterConfig
from restify.context import Context
from restify.http.methods import normalize_methods
from restify.middleware.allowed_methods import (
    MATCHED_ROUTE_KEY,
    PATH_METHODS_KEY,
    AllowedMethodsMiddleware,
)
from restify.middleware.protocol import Middleware, Next
from restify.routing.matcher import match_route, methods_for_path
from restify.routing.pattern import compile_pattern
from restify.routing.route import Route

logger = logging.getLogger("restify.routing")


class RestifyRouter:
    """Route table with a fluent registration API.

    Thread safety:
        Registration is expected to finish before the first request and
        is not synchronized. Matching only reads the table, and each
        match carries its own slug values.
    """

    __slots__ = ("_prefix", "_routes", "config")

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        prefix: str | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._routes: list[Route] = []
        self._prefix: str = ""
        self.prefix(self.config.prefix if prefix is None else prefix)

    @property
    def route_table(self) -> tuple[Route, ...]:
        """Registered routes, in registration order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RestifyRouter(prefix={self._prefix!r}, routes={len(self._routes)})"

    # -- Registration --

    def prefix(self, prefix: str | None) -> "RestifyRouter":
        """Set the prefix for routes registered from now on.

        Already registered routes keep their paths.
        """
        self._prefix = prefix or ""
        return self

    def add_route(
        self,
        methods: str | Iterable[str],
        path: str,
        handler: Middleware,
    ) -> "RestifyRouter":
        """Register *handler* for *methods* on ``prefix + path``.

        Raises ``InvalidPatternError`` for a bad template and
        ``UnsupportedMethodError`` for a method outside the registry.
        """
        method_set = normalize_methods(methods)
        pattern = compile_pattern(self._prefix + path)
        route = Route.from_pattern(pattern, method_set, handler)
        self._routes.append(route)
        logger.debug("Registered %s %s", "|".join(sorted(method_set)), route.raw_template)
        return self

    def _verb(self, method: str, path: str, handler: Middleware | None) -> Any:
        if handler is not None:
            return self.add_route(method, path, handler)

        def decorator(func: Middleware) -> Middleware:
            self.add_route(method, path, func)
            return func

        return decorator

    def get(self, path: str, handler: Middleware | None = None) -> Any:
        """Register a GET route, or return a decorator when *handler* is omitted."""
        return self._verb("GET", path, handler)

    def head(self, path: str, handler: Middleware | None = None) -> Any:
        return self._verb("HEAD", path, handler)

    def post(self, path: str, handler: Middleware | None = None) -> Any:
        return self._verb("POST", path, handler)

    def put(self, path: str, handler: Middleware | None = None) -> Any:
        return self._verb("PUT", path, handler)

    def delete(self, path: str, handler: Middleware | None = None) -> Any:
        return self._verb("DELETE", path, handler)

    def options(self, path: str, handler: Middleware | None = None) -> Any:
        return self._verb("OPTIONS", path, handler)

    def patch(self, path: str, handler: Middleware | None = None) -> Any:
        return self._verb("PATCH", path, handler)

    # -- Composition --

    def include(self, *routers: "RestifyRouter") -> "RestifyRouter":
        """Append the routes of *routers* to this router, in order."""
        for router in routers:
            self._routes.extend(router._routes)
        return self

    def controllers(self, *controllers: Any) -> "RestifyRouter":
        """Register ``"METHOD /path"``-keyed handlers from controller objects.

        See ``restify.routing.controllers.parse_controllers``.
        """
        from restify.routing.controllers import parse_controllers

        for entry in parse_controllers(controllers):
            self.add_route(entry.methods, entry.path, entry.handler)
        return self

    # -- Middleware --

    def routes(self) -> Middleware:
        """Return the routing middleware for this router.

        On a match the route is recorded in ``ctx.state["matched_route"]``,
        a 404 status is reset to 200, slugs are attached to
        ``ctx.req.slugs`` and the handler's result is returned. Without a
        match the rest of the chain runs; the methods registered for the
        path under any method are left in ``ctx.state["path_methods"]``.
        Handler errors propagate.
        """
        routes = self._routes

        async def dispatch(ctx: Context, next: Next) -> Any:
            match = match_route(ctx.method, ctx.path, routes)
            if match is None:
                path_methods = methods_for_path(ctx.path, routes)
                if path_methods:
                    ctx.state[PATH_METHODS_KEY] = path_methods
                return await invoke(next)

            ctx.state[MATCHED_ROUTE_KEY] = match
            if ctx.res.status == 404:
                ctx.res.status = 200
            ctx.req.slugs = match.slugs

            return await invoke(match.route.handler, ctx, next)

        return dispatch

    def allowed_methods(
        self,
        config: AllowedMethodsConfig | None = None,
    ) -> AllowedMethodsMiddleware:
        """Return the method-negotiation middleware.

        The implemented methods default to this router's configured
        ``methods``.
        """
        config = config or AllowedMethodsConfig()
        if config.methods is None and self.config.methods is not None:
            config = replace(config, methods=self.config.methods)
        return AllowedMethodsMiddleware(config)
