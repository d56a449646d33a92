# Routes package init
"""
Snippetbox: Routes Package
=============================

What:  The fixed route table and the check that keeps it unambiguous.

Route Inventory:
    - home.py:      GET  /                      (home page, exact root only)
    - snippets.py:  GET  /snippet/view/{id}     (placeholder view)
                    GET  /snippet/create        (placeholder form)
                    POST /snippet/create        (placeholder create, 201)
    - main.py:      GET  /static/*              (static assets, mounted)

Every GET route also answers HEAD.

Design Principle:
    The table is a plain mapping from (method, path pattern) to a function.
    It is built once by create_app() and never changed afterwards.
"""

from typing import Iterable, Set, Tuple

from fastapi import APIRouter
from starlette.routing import BaseRoute, Mount, Route

from snippetbox.routes import home, snippets

ROUTERS = (home.router, snippets.router)


def collect_routes(routers: Iterable[APIRouter], *mounts: Mount) -> Tuple[BaseRoute, ...]:
    """
    Flatten routers and mounts into one immutable route table.

    APIRouter prefixes are already part of each route's path, so the
    table holds full (method, path) patterns.
    """
    routes = [route for router in routers for route in router.routes]
    routes.extend(mounts)
    return tuple(routes)


def assert_unique_routes(routes: Iterable[BaseRoute]) -> None:
    """
    Reject route tables where two entries claim the same (method, path).

    What:    Walks the registered routes and mounts.
    Why:     Starlette dispatches to the first match, so a duplicate would be
             silently shadowed; fail at startup instead.
    Raises:  RuntimeError naming the duplicated pair.
    """
    seen: Set[Tuple[str, str]] = set()
    for route in routes:
        if isinstance(route, Mount):
            keys = {("*", route.path + "/")}
        elif isinstance(route, Route):
            keys = {(method, route.path) for method in (route.methods or {"*"})}
        else:
            # APIRoute subclasses Route; anything else (websockets) has no method
            keys = {("*", getattr(route, "path", repr(route)))}

        clash = seen & keys
        if clash:
            method, path = sorted(clash)[0]
            raise RuntimeError(f"Duplicate route registered: {method} {path}")
        seen |= keys
