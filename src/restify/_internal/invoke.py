"""Invoke helpers — call sync or async callables uniformly.

Middleware, route handlers and ``next`` continuations may each be plain
functions or coroutine functions. Anything that calls one of them goes
through ``invoke`` so the sync/async check lives in one place.

Usage::

    from restify._internal.invoke import invoke

    result = await invoke(handler, ctx, next)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable.

    Works for both::

        def handler(ctx, next):
            return "Hi"

        async def handler(ctx, next):
            return await load()
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
