"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(ctx: Context, next: Next) -> Any

Built-in middleware:
    AllowedMethodsMiddleware -- 405/501/OPTIONS answers with an Allow header
"""

from restify.middleware.allowed_methods import AllowedMethodsMiddleware, allowed_methods
from restify.middleware.compose import compose
from restify.middleware.protocol import Middleware, Next

__all__ = [
    "AllowedMethodsMiddleware",
    "Middleware",
    "Next",
    "allowed_methods",
    "compose",
]
