"""Middleware composition.

Folds an ordered list of middleware into one middleware. Each one gets a
``next`` that runs the middleware after it; the last one's ``next`` runs
the outer continuation, if any.
"""

from collections.abc import Sequence
from typing import Any

from restify._internal.invoke import invoke
from restify.context import Context
from restify.middleware.protocol import Middleware, Next


def compose(middleware: Sequence[Middleware]) -> Middleware:
    """Compose *middleware* into a single ``(ctx, next)`` middleware.

    Calling ``next()`` more than once from the same middleware raises
    ``RuntimeError``.
    """
    chain = tuple(middleware)

    async def composed(ctx: Context, next: Next | None = None) -> Any:
        last_index = -1

        async def dispatch(index: int) -> Any:
            nonlocal last_index
            if index <= last_index:
                msg = "next() called multiple times"
                raise RuntimeError(msg)
            last_index = index
            if index == len(chain):
                if next is None:
                    return None
                return await invoke(next)
            return await invoke(chain[index], ctx, lambda: dispatch(index + 1))

        return await dispatch(0)

    return composed
