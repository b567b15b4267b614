"""Controller adapter — derive routes from ``"METHOD /path"`` keys.

A controller is a mapping, or any object with attributes, whose callable
members are keyed by method and path::

    users = {
        "GET /users": list_users,
        "GET|HEAD /users/:id": show_user,
        "POST /users": create_user,
    }

    router.controllers(users)

A key without a method is registered for GET with a warning. A path that
does not start with ``/`` is skipped with a warning.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from restify.errors import ConfigurationError, MissingPathError
from restify.http.methods import normalize_methods

logger = logging.getLogger("restify.routing")


@dataclass(frozen=True, slots=True)
class ControllerEntry:
    """One route declared by a controller key."""

    methods: frozenset[str]
    path: str
    handler: Any


def _members(controller: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(controller, Mapping):
        items = controller.items()
    else:
        items = vars(controller).items()
    for key, value in items:
        if not isinstance(key, str) or key.startswith("__"):
            continue
        if callable(value):
            yield key, value


def parse_controller_key(key: str) -> tuple[frozenset[str], str] | None:
    """Split ``"GET|POST /path"`` into methods and path.

    Returns ``None`` for a path without a leading ``/`` (logged, skipped).
    Tokens are separated by any run of whitespace. Raises
    ``MissingPathError`` for an empty key, ``ConfigurationError`` for a key
    with more than two tokens and ``UnsupportedMethodError`` for an unknown
    method token.
    """
    tokens = key.split()
    if not tokens:
        msg = f"{key!r}: a path is required"
        raise MissingPathError(msg)
    if len(tokens) > 2:
        msg = f'{key!r}: expected "METHOD /path"'
        raise ConfigurationError(msg)

    if len(tokens) == 1:
        method, path = "GET", tokens[0]
        logger.warning('"%s" has no method; registering it as GET', path)
    else:
        method, path = tokens

    methods = normalize_methods(method.split("|"))

    if not path.startswith("/"):
        logger.warning('"%s" skipped: path must start with "/"', path)
        return None
    return methods, path


def parse_controllers(controllers: Iterable[Any]) -> list[ControllerEntry]:
    """Collect the routes declared by *controllers*, in declaration order."""
    entries: list[ControllerEntry] = []
    for controller in controllers:
        for key, handler in _members(controller):
            parsed = parse_controller_key(key)
            if parsed is None:
                continue
            methods, path = parsed
            entries.append(ControllerEntry(methods=methods, path=path, handler=handler))
    return entries
