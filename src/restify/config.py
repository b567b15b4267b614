"""Router, negotiation and host configuration.

Frozen dataclasses — immutable after creation, no string-key lookups.
"""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration.

    ``prefix`` is prepended to every path registered until the router's
    ``prefix()`` changes it. ``methods`` is the list of implemented
    methods handed to ``allowed_methods()``; ``None`` means every method
    in the registry::

        RestifyRouter(RouterConfig(prefix="/api", methods=("GET", "POST")))
    """

    prefix: str = ""
    methods: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class AllowedMethodsConfig:
    """Method-negotiation configuration.

    ``throw`` raises instead of setting a 405/501 status. When
    ``not_implemented`` is given it builds the raised error for both the
    501 and 405 cases.
    """

    methods: tuple[str, ...] | None = None
    throw: bool = False
    not_implemented: Callable[[], Exception] | None = None


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Reference host configuration.

    ``debug`` adds the traceback to 500 response bodies.
    """

    debug: bool = False
