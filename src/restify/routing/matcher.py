"""Best-match route selection.

Selection policy, in order:

1. A route whose template equals the path byte for byte and has no slugs
   wins immediately, whatever else is registered.
2. Otherwise every route whose regex matches the full path is a candidate,
   and the candidate with the longest template wins. Among equally long
   templates the first registered one is kept.

Matching only reads the route table. Captured values are returned on a
fresh ``RouteMatch`` per call, so concurrent requests never share them.
"""

from collections.abc import Iterable

from restify.routing.route import Route, RouteMatch


def match_route(method: str, path: str, routes: Iterable[Route]) -> RouteMatch | None:
    """Select the route for *method* and *path*, or ``None``."""
    candidates = [route for route in routes if method in route.methods]

    for route in candidates:
        if route.raw_template == path and not route.slug_names:
            return RouteMatch(route=route)

    best: RouteMatch | None = None
    for route in candidates:
        values = route.match(path)
        if values is None:
            continue
        if best is None or len(route.raw_template) > len(best.route.raw_template):
            best = RouteMatch(route=route, slug_values=values)
    return best


def methods_for_path(path: str, routes: Iterable[Route]) -> frozenset[str]:
    """Union of the methods of every route whose pattern matches *path*.

    Used when no route matched the request method, so method negotiation
    can still report what the path supports.
    """
    methods: set[str] = set()
    for route in routes:
        if route.match(path) is not None:
            methods.update(route.methods)
    return frozenset(methods)
