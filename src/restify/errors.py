"""Restify exception hierarchy.

Setup errors (bad templates, unknown methods) derive from
``ConfigurationError`` and abort router construction. Runtime errors that
map to an HTTP status derive from ``HTTPError``.
"""

from collections.abc import Iterable
from dataclasses import dataclass


class RestifyError(Exception):
    """Base for all restify-specific errors."""


class ConfigurationError(RestifyError):
    """Raised when routes or routers are configured incorrectly.

    Always raised during setup, before any request is served.
    """


class InvalidPatternError(ConfigurationError):
    """A path template cannot be compiled."""


class UnsupportedMethodError(ConfigurationError):
    """A method name is not part of the HTTP method registry."""


class MissingPathError(ConfigurationError):
    """A controller entry does not declare a path."""


@dataclass(frozen=True, slots=True)
class HTTPError(RestifyError):
    """An error that maps directly to an HTTP status code.

    Raised by middleware or handlers. The host catches these and turns
    them into a response carrying ``status`` and ``headers``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


def _allow_value(allowed: Iterable[str]) -> str:
    return ", ".join(allowed)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — a route matched the path but not the method.

    Carries an ``Allow`` header listing the methods of the matched route.
    """

    def __init__(self, allowed: Iterable[str] = (), detail: str = "") -> None:
        allow_value = _allow_value(allowed)
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class MethodNotImplemented(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """501 — the request method is not implemented by this application."""

    def __init__(self, allowed: Iterable[str] = (), detail: str = "Not Implemented") -> None:
        super().__init__(
            status=501,
            detail=detail,
            headers=(("Allow", _allow_value(allowed)),),
        )
