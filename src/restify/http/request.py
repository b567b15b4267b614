"""Per-request HTTP request data.

Unlike the response, most of the request is fixed once built. ``slugs``
is the one field middleware writes: the router fills it with the named
path segments of the matched route.
"""

from dataclasses import dataclass, field
from typing import Any

from restify.http.headers import Headers


@dataclass(slots=True)
class Request:
    """An HTTP request as seen by middleware.

    ``path`` never contains the query string; it is kept separately in
    ``query_string``. The body is read in full by the host before the
    middleware chain runs.
    """

    method: str
    path: str
    query_string: str = ""
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    slugs: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def json(self) -> Any:
        """Parse the body as JSON."""
        import json as json_module

        return json_module.loads(self.body)

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], body: bytes = b"") -> "Request":
        """Create a Request from an ASGI scope and an already-read body."""
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=Headers.from_asgi(scope.get("headers", ())),
            body=body,
        )
