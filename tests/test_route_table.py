"""
Snippetbox: Route Table Tests
================================

What:  The route table built by create_app() is fixed and unambiguous.
"""

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.routing import Mount

import snippetbox.main
from snippetbox.config import Settings
from snippetbox.routes import ROUTERS, assert_unique_routes, collect_routes


def _handler():
    return "ok"


def _route_pairs(routes):
    pairs = set()
    for route in routes:
        if isinstance(route, Mount):
            pairs.add(("*", route.path))
        else:
            pairs.update((method, route.path) for method in route.methods)
    return pairs


class TestRouteTable:
    def test_registered_pairs(self, app):
        assert _route_pairs(app.state.route_table) == {
            ("GET", "/"),
            ("HEAD", "/"),
            ("GET", "/snippet/view/{id}"),
            ("HEAD", "/snippet/view/{id}"),
            ("GET", "/snippet/create"),
            ("HEAD", "/snippet/create"),
            ("POST", "/snippet/create"),
            ("*", "/static"),
        }

    def test_table_is_immutable(self, app):
        assert isinstance(app.state.route_table, tuple)

    def test_factory_table_is_unique(self, app):
        assert_unique_routes(app.state.route_table)

    def test_router_prefix_in_paths(self):
        paths = {route.path for route in collect_routes(ROUTERS)}
        assert "/snippet/view/{id}" in paths

    def test_same_path_different_methods_allowed(self):
        app = FastAPI()
        app.get("/item")(_handler)
        app.post("/item")(_handler)

        assert_unique_routes(app.router.routes)

    def test_duplicate_method_and_path_rejected(self):
        app = FastAPI(openapi_url=None, docs_url=None, redoc_url=None)
        app.get("/dup")(_handler)
        app.api_route("/dup", methods=["GET", "POST"])(_handler)

        with pytest.raises(RuntimeError, match="Duplicate route registered: GET /dup"):
            assert_unique_routes(app.router.routes)

    def test_duplicate_across_routers_rejected(self):
        first = APIRouter()
        second = APIRouter()
        first.get("/")(_handler)
        second.get("/")(_handler)

        with pytest.raises(RuntimeError, match="Duplicate route registered: GET /"):
            assert_unique_routes(collect_routes((first, second)))

    def test_duplicate_across_prefixed_routers_rejected(self):
        first = APIRouter(prefix="/snippet")
        second = APIRouter()
        first.get("/create")(_handler)
        second.get("/snippet/create")(_handler)

        with pytest.raises(RuntimeError, match="GET /snippet/create"):
            assert_unique_routes(collect_routes((first, second)))

    def test_duplicate_mount_rejected(self, tmp_path):
        static = StaticFiles(directory=str(tmp_path))
        routes = collect_routes((), Mount("/static", app=static), Mount("/static", app=static))

        with pytest.raises(RuntimeError, match="/static/"):
            assert_unique_routes(routes)

    def test_create_app_refuses_duplicate_routers(self, monkeypatch, test_logger):
        shadow = APIRouter()
        shadow.get("/")(_handler)
        monkeypatch.setattr(snippetbox.main, "ROUTERS", ROUTERS + (shadow,))

        with pytest.raises(RuntimeError, match="Duplicate route registered: GET /"):
            snippetbox.main.create_app(settings=Settings(), logger=test_logger)
