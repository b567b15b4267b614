"""Router discovery and merging.

Feature modules each export one or more ``RestifyRouter`` instances; the
application assembles them into a single router::

    # app/routers/product.py
    product_router = RestifyRouter(prefix="/product").get("/", index)

    # app/main.py
    router = load_routers("app.routers.product")
    app.add_middleware(router.routes())
"""

import importlib
import logging
from collections.abc import Iterable
from types import ModuleType

from restify.routing.router import RestifyRouter

logger = logging.getLogger("restify.routing")


def merge_routers(routers: Iterable[RestifyRouter]) -> RestifyRouter:
    """Combine *routers* into one.

    A single router is returned as-is. Otherwise a new router holds the
    concatenation of every route table, in order.
    """
    routers = list(routers)
    if len(routers) == 1:
        return routers[0]
    merged = RestifyRouter()
    merged.include(*routers)
    return merged


def find_routers(module: ModuleType) -> list[RestifyRouter]:
    """Return the ``RestifyRouter`` instances a module exports.

    Names starting with ``_`` are ignored. Order follows the module
    namespace (definition order).
    """
    return [
        value
        for name, value in vars(module).items()
        if not name.startswith("_") and isinstance(value, RestifyRouter)
    ]


def load_routers(module: str | ModuleType) -> RestifyRouter:
    """Import *module* and merge the routers it exports.

    *module* is a dotted module name or an already imported module.
    """
    if isinstance(module, str):
        module = importlib.import_module(module)
    routers = find_routers(module)
    logger.debug("Loaded %d router(s) from %s", len(routers), module.__name__)
    return merge_routers(routers)
