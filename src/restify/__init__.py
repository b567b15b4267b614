"""Restify — URL-path routing for (context, next) middleware chains.

Maps a request's method and path to a registered handler, extracting
named path segments ("slugs") on the way.

Basic usage::

    from restify import App, RestifyRouter

    router = (
        RestifyRouter()
        .get("/", lambda ctx, next: "Hi, world!")
        .put("/{id}", lambda ctx, next: ctx.req.slugs["id"])
        .delete("/:id([0-9]+)", lambda ctx, next: ctx.req.slugs["id"])
    )

    app = App()
    app.add_middleware(router.routes())
    app.add_middleware(router.allowed_methods())
"""

__version__ = "0.1.0"
__all__ = [
    "AllowedMethodsConfig",
    "AllowedMethodsMiddleware",
    "App",
    "AppConfig",
    "ConfigurationError",
    "Context",
    "HTTPError",
    "HttpMethod",
    "InvalidPatternError",
    "MethodNotAllowed",
    "MethodNotImplemented",
    "Middleware",
    "MissingPathError",
    "Next",
    "PathPattern",
    "Request",
    "ResponseState",
    "RestifyError",
    "RestifyRouter",
    "Route",
    "RouteMatch",
    "RouterConfig",
    "UnsupportedMethodError",
    "compile_pattern",
    "load_routers",
    "match_route",
    "merge_routers",
    "parse_controllers",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import restify`` fast while providing a clean top-level API.
    """
    if name == "App":
        from restify.app import App

        return App

    if name in ("AllowedMethodsConfig", "AppConfig", "RouterConfig"):
        from restify import config as _config

        return getattr(_config, name)

    if name == "Context":
        from restify.context import Context

        return Context

    if name == "HttpMethod":
        from restify.http.methods import HttpMethod

        return HttpMethod

    if name == "Request":
        from restify.http.request import Request

        return Request

    if name == "ResponseState":
        from restify.http.response import ResponseState

        return ResponseState

    if name in ("Middleware", "Next"):
        from restify.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "AllowedMethodsMiddleware":
        from restify.middleware.allowed_methods import AllowedMethodsMiddleware

        return AllowedMethodsMiddleware

    if name == "RestifyRouter":
        from restify.routing.router import RestifyRouter

        return RestifyRouter

    if name in ("PathPattern", "compile_pattern"):
        from restify.routing import pattern as _pattern

        return getattr(_pattern, name)

    if name in ("Route", "RouteMatch"):
        from restify.routing import route as _route

        return getattr(_route, name)

    if name == "match_route":
        from restify.routing.matcher import match_route

        return match_route

    if name in ("load_routers", "merge_routers"):
        from restify.routing import loader as _loader

        return getattr(_loader, name)

    if name == "parse_controllers":
        from restify.routing.controllers import parse_controllers

        return parse_controllers

    if name in (
        "ConfigurationError",
        "HTTPError",
        "InvalidPatternError",
        "MethodNotAllowed",
        "MethodNotImplemented",
        "MissingPathError",
        "RestifyError",
        "UnsupportedMethodError",
    ):
        from restify import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
