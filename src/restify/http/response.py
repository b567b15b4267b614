"""Mutable per-request response state.

Middleware sets ``status``, headers and ``body`` while the chain runs;
the host serializes the final state once the chain has returned.
"""

import json as json_module
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

DEFAULT_STATUS = 404


@dataclass(slots=True)
class ResponseState:
    """The response being built for one request.

    ``status`` starts at 404: nothing has handled the request yet.
    Header names are case-insensitive; the last ``set()`` wins.
    """

    status: int = DEFAULT_STATUS
    body: Any = None
    _headers: dict[str, tuple[str, str]] = field(default_factory=dict, repr=False)

    def set(self, name: str, value: str | Iterable[str]) -> None:
        """Set a header. A list of values is joined with ``", "``."""
        if not isinstance(value, str):
            value = ", ".join(value)
        self._headers[name.lower()] = (name, value)

    def get(self, name: str, default: str | None = None) -> str | None:
        entry = self._headers.get(name.lower())
        if entry is None:
            return default
        return entry[1]

    def has(self, name: str) -> bool:
        return name.lower() in self._headers

    @property
    def headers(self) -> Iterator[tuple[str, str]]:
        """``(name, value)`` pairs in the order they were first set."""
        return iter(self._headers.values())

    # -- Serialization --

    def render(self) -> tuple[bytes, str]:
        """Encode the body and pick a default content type.

        ``bytes`` pass through, ``str`` is UTF-8 text, ``dict``/``list``
        become JSON, ``None`` is empty and anything else goes through
        ``str()``.
        """
        body = self.body
        if body is None:
            return b"", "text/plain; charset=utf-8"
        if isinstance(body, bytes):
            return body, "application/octet-stream"
        if isinstance(body, (dict, list)):
            return json_module.dumps(body).encode("utf-8"), "application/json"
        if not isinstance(body, str):
            body = str(body)
        return body.encode("utf-8"), "text/plain; charset=utf-8"
