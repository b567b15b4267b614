"""Restify application — a minimal middleware host.

Mutable during setup (middleware registration). Frozen when ``__call__()``
is first invoked: the middleware list is composed once into the pipeline
that serves every request.

Usage::

    app = App()
    app.add_middleware(router.routes())
    app.add_middleware(router.allowed_methods())

    # serve `app` with any ASGI 3 server
"""

import threading
from collections.abc import Awaitable, Callable
from typing import Any

from restify._internal.asgi import Receive, Scope, Send
from restify.config import AppConfig
from restify.context import Context
from restify.middleware.compose import compose
from restify.middleware.protocol import Middleware
from restify.server.handler import handle_request


class App:
    """The restify host application.

    Thread safety:
        The setup phase is single-threaded. The freeze transition uses a
        Lock + double-check so exactly one thread composes the pipeline,
        even when several ASGI workers hit the first request at once.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware_list",
        # Compiled state (populated by _freeze)
        "_pipeline",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._middleware_list: list[Middleware] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._pipeline: Callable[[Context], Awaitable[Any]] | None = None

    # -- Middleware --

    def add_middleware(self, middleware: Middleware) -> "App":
        """Append a middleware to the pipeline."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)
        return self

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Answers the lifespan protocol and runs HTTP scopes through the
        middleware pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._pipeline is not None

        await handle_request(
            scope,
            receive,
            send,
            pipeline=self._pipeline,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze at startup so the first request pays no setup cost."""
        self._ensure_frozen()

        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compose the middleware list into the runtime pipeline.

        MUST only be called while holding _freeze_lock.
        """
        self._pipeline = compose(tuple(self._middleware_list))
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Add middleware before the first request."
            )
            raise RuntimeError(msg)
