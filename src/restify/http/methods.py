"""HTTP method registry.

The closed set of method names a route may be registered for.
"""

from collections.abc import Iterable
from enum import StrEnum

from restify.errors import ConfigurationError, UnsupportedMethodError


class HttpMethod(StrEnum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"


ALL_METHODS: tuple[str, ...] = tuple(m.value for m in HttpMethod)


def is_http_method(name: str) -> bool:
    """True if *name* is a registered method (case-sensitive)."""
    return name in HttpMethod.__members__


def normalize_methods(methods: str | Iterable[str]) -> frozenset[str]:
    """Turn a method name or iterable of names into a validated set.

    Names are upper-cased. Raises ``UnsupportedMethodError`` for a name
    outside the registry and ``ConfigurationError`` for an empty set.
    """
    if isinstance(methods, str):
        methods = [methods]
    normalized = frozenset(m.upper() for m in methods)
    if not normalized:
        msg = "A route needs at least one HTTP method."
        raise ConfigurationError(msg)
    for method in normalized:
        if not is_http_method(method):
            msg = f"Unsupported method {method!r}"
            raise UnsupportedMethodError(msg)
    return normalized


def ordered(methods: Iterable[str]) -> list[str]:
    """Return *methods* in registry order, dropping unknown names."""
    present = set(methods)
    return [m for m in ALL_METHODS if m in present]
