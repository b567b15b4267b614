"""Method negotiation — 405, 501 and OPTIONS answers for routed paths.

Runs after the router in the chain. It awaits ``next()`` first and only
acts when nothing downstream produced a definitive response (status
unset or still 404).

- Request method not implemented at all: 501.
- Path matched a route but not for this method: 405.
- ``OPTIONS`` on a matched path: 200 with an empty body.

Every answer carries an ``Allow`` header with the methods registered for
the path: those of the matched route, or, when the router found no route
for the request method, those recorded under ``ctx.state["path_methods"]``.
"""

from typing import Any

from restify._internal.invoke import invoke
from restify.config import AllowedMethodsConfig
from restify.context import Context
from restify.errors import MethodNotAllowed, MethodNotImplemented
from restify.http.methods import ALL_METHODS, ordered
from restify.middleware.protocol import Next
from restify.routing.route import RouteMatch

MATCHED_ROUTE_KEY = "matched_route"
PATH_METHODS_KEY = "path_methods"


class AllowedMethodsMiddleware:
    """Fill in 405/501/OPTIONS responses for requests no handler answered.

    Usage::

        app.add_middleware(router.routes())
        app.add_middleware(router.allowed_methods())

    Or raise instead of setting the status::

        app.add_middleware(AllowedMethodsMiddleware(AllowedMethodsConfig(
            throw=True,
            not_implemented=lambda: HTTPError(status=418),
        )))
    """

    __slots__ = ("config", "implemented")

    def __init__(self, config: AllowedMethodsConfig | None = None) -> None:
        self.config = config or AllowedMethodsConfig()
        methods = self.config.methods if self.config.methods is not None else ALL_METHODS
        self.implemented: frozenset[str] = frozenset(m.upper() for m in methods)

    async def __call__(self, ctx: Context, next: Next) -> Any:
        result = await invoke(next)

        status = ctx.res.status
        if status and status != 404:
            return result

        allowed = ordered(_allowed_for(ctx))
        method = ctx.method

        if method not in self.implemented:
            if self.config.throw:
                raise self._error(MethodNotImplemented(allowed))
            ctx.res.status = 501
            ctx.res.set("Allow", allowed)
        elif allowed:
            if method == "OPTIONS":
                ctx.res.status = 200
                ctx.body = ""
                ctx.res.set("Allow", allowed)
            elif method not in allowed:
                if self.config.throw:
                    raise self._error(MethodNotAllowed(allowed))
                ctx.res.status = 405
                ctx.res.set("Allow", allowed)
        return result

    def _error(self, default: Exception) -> Exception:
        if self.config.not_implemented is not None:
            return self.config.not_implemented()
        return default


def _allowed_for(ctx: Context) -> frozenset[str]:
    """Methods of the matched route, else of any route matching the path."""
    matched: RouteMatch | None = ctx.state.get(MATCHED_ROUTE_KEY)
    if matched is not None:
        return matched.methods
    return ctx.state.get(PATH_METHODS_KEY, frozenset())


def allowed_methods(config: AllowedMethodsConfig | None = None) -> AllowedMethodsMiddleware:
    """Build the method-negotiation middleware."""
    return AllowedMethodsMiddleware(config)
