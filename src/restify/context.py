"""Per-request context passed through the middleware chain.

One ``Context`` is created per request and handed to every middleware
together with its ``next`` continuation. It is never shared between
requests.
"""

from dataclasses import dataclass, field
from typing import Any

from restify.http.request import Request
from restify.http.response import ResponseState


@dataclass(slots=True)
class Context:
    """Request, response state and a free-form ``state`` bag.

    Middleware communicate through ``state``; the router records the
    matched route there under ``"matched_route"``.
    """

    req: Request
    res: ResponseState = field(default_factory=ResponseState)
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def body(self) -> Any:
        return self.res.body

    @body.setter
    def body(self, value: Any) -> None:
        self.res.body = value

    @property
    def method(self) -> str:
        return self.req.method

    @property
    def path(self) -> str:
        return self.req.path
