"""ASGI handler — translates ASGI scope/messages to restify types.

The only component that touches raw ASGI directly. Reads the request
body, builds the ``Context``, runs the middleware chain and sends the
final response state back through ``send()``.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from restify._internal.asgi import Receive, Scope, Send
from restify.context import Context
from restify.errors import HTTPError
from restify.http.request import Request
from restify.server.errors import apply_http_error, apply_internal_error
from restify.server.sender import send_response


async def read_body(receive: Receive) -> bytes:
    """Drain ``http.request`` messages into one bytes object."""
    chunks: list[bytes] = []
    while True:
        message = await receive()
        if message["type"] != "http.request":
            break
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    pipeline: Callable[[Context], Awaitable[Any]],
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the composed middleware."""
    if scope["type"] != "http":
        return

    body = await read_body(receive)
    ctx = Context(req=Request.from_asgi(dict(scope), body))

    try:
        result: Any = await pipeline(ctx)
        # A returned value is the body unless middleware already set one
        if result is not None and ctx.res.body is None:
            ctx.res.body = result
    except HTTPError as exc:
        apply_http_error(ctx, exc)
    except Exception as exc:
        apply_internal_error(ctx, exc, debug=debug)

    await send_response(ctx.res, send)
