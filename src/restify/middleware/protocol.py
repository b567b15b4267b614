"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(ctx: Context, next: Next) -> Any: ...

or the same shape as a plain function. No base class required.

``next`` takes no arguments and runs the rest of the chain. It returns
an awaitable; middleware that want to act after the rest of the chain
await it first::

    async def timing(ctx, next):
        start = time.monotonic()
        result = await next()
        ctx.res.set("X-Time", f"{time.monotonic() - start:.3f}")
        return result
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeAlias

from restify.context import Context

# Continue with the rest of the chain
Next: TypeAlias = Callable[[], Awaitable[Any]]


class Middleware(Protocol):
    """Protocol for restify middleware.

    Accepts both functions and callable objects::

        def hello(ctx: Context, next: Next) -> str:
            return "Hi"

        class AllowedMethodsMiddleware:
            async def __call__(self, ctx: Context, next: Next) -> Any:
                ...
    """

    def __call__(self, ctx: Context, next: Next) -> Any: ...
