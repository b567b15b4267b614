"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from typing import Any

from restify.routing.pattern import PathPattern


@dataclass(frozen=True, slots=True)
class Route(PathPattern):
    """A compiled path pattern bound to its methods and handler.

    Created during setup. ``raw_template`` is the fully-prefixed path.
    Routes hold no per-request state; captured values live on
    ``RouteMatch``.
    """

    methods: frozenset[str] = frozenset()
    handler: Any = None

    @classmethod
    def from_pattern(
        cls,
        pattern: PathPattern,
        methods: frozenset[str],
        handler: Any,
    ) -> "Route":
        return cls(
            raw_template=pattern.raw_template,
            regex=pattern.regex,
            slug_names=pattern.slug_names,
            slug_positions=pattern.slug_positions,
            methods=methods,
            handler=handler,
        )


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    One instance per request. ``slug_values`` is aligned with
    ``route.slug_names``.
    """

    route: Route
    slug_values: tuple[str, ...] = ()

    @property
    def slugs(self) -> dict[str, str]:
        """Slug name to captured value."""
        return dict(zip(self.route.slug_names, self.slug_values, strict=True))

    @property
    def methods(self) -> frozenset[str]:
        return self.route.methods
