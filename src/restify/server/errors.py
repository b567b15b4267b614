"""Error handling for the reference host.

Maps an ``HTTPError`` escaping the middleware chain to its status,
headers and detail, and any other exception to a logged 500.
"""

import logging
import traceback

from restify.context import Context
from restify.errors import HTTPError

logger = logging.getLogger("restify.server")


def apply_http_error(ctx: Context, exc: HTTPError) -> None:
    """Write *exc* into the response state."""
    logger.debug("%d %s %s: %s", exc.status, ctx.method, ctx.req.url, exc.detail)

    ctx.res.status = exc.status
    ctx.res.body = exc.detail or f"Error {exc.status}"
    for name, value in exc.headers:
        ctx.res.set(name, value)


def apply_internal_error(ctx: Context, exc: Exception, *, debug: bool) -> None:
    """Turn an unexpected exception into a 500 response."""
    logger.exception("500 %s %s", ctx.method, ctx.req.url)

    ctx.res.status = 500
    if debug:
        ctx.res.body = "".join(traceback.format_exception(exc))
    else:
        ctx.res.body = "Internal Server Error"
