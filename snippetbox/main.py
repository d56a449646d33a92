"""
Snippetbox: FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes dependency wiring, middleware registration, route mounting
       and error handling in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by the CLI (python -m snippetbox) and by the test suite;
       `uvicorn snippetbox.main:app` also works through the module-level app.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  app.state:  logger · templates                     │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │  Request ID  │→│  Logging        │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  GET /  ·  GET /snippet/view/{id}                   │
    │  GET /snippet/create  ·  POST /snippet/create       │
    │  GET /static/* (StaticFiles mount)                  │
    │                                                     │
    │  Exception Handlers:                                │
    │  NotFound→404 │ HTTPException 404/405→404           │
    │  TemplateRender→500 │ Exception→500                 │
    └─────────────────────────────────────────────────────┘
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Mount

from snippetbox import __version__
from snippetbox.config import Settings
from snippetbox.exceptions import NotFoundError, TemplateRenderError
from snippetbox.log import LOGGER_NAME
from snippetbox.middleware.logging import RequestLoggingMiddleware
from snippetbox.middleware.request_id import RequestIDMiddleware, request_id_var
from snippetbox.routes import ROUTERS, assert_unique_routes, collect_routes

# Bodies match what net/http-style servers send, so clients see the same
# text whether the miss came from the router or from a handler
NOT_FOUND_BODY = "404 page not found"
SERVER_ERROR_BODY = "Internal Server Error"


def not_found_response() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_BODY, status_code=404)


def server_error_response() -> PlainTextResponse:
    return PlainTextResponse(SERVER_ERROR_BODY, status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Log application startup and shutdown.

    There are no resources to open or close: the route table, templates
    and logger are all built by create_app() before the server starts.
    """
    logger: logging.Logger = app.state.logger
    logger.info(
        "application startup",
        extra={"version": __version__, "static_dir": str(app.state.settings.static_dir)},
    )

    yield

    logger.info("application shutdown")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        NotFoundError            → 404 (bad snippet id)
        StarletteHTTPException   → 404 for 404/405, otherwise its own status
        TemplateRenderError      → 500, cause logged
        Exception (fallback)     → 500, traceback logged

    Security: responses never carry internal details. Details go to the
    injected logger only.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        request.app.state.logger.debug(
            exc.message, extra={"request_id": request_id_var.get(), **exc.context}
        )
        return not_found_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Unmatched routes and missing static files.

        405 is folded into 404: a path the route table has no entry for
        with this method is simply not found.
        """
        if exc.status_code in (404, 405):
            return not_found_response()
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(TemplateRenderError)
    async def handle_template_error(request: Request, exc: TemplateRenderError):
        """Page could not be composed: generic message to user, details logged."""
        request.app.state.logger.error(
            exc.message,
            extra={
                "request_id": request_id_var.get(),
                "method": request.method,
                "uri": request.url.path,
                **exc.context,
            },
        )
        return server_error_response()

    # Starlette runs this handler in ServerErrorMiddleware, outside the
    # request ID and logging middleware: the request gets no "received
    # request" line and no X-Request-ID header, and the exception is
    # re-raised to the server once the 500 has been sent.
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all for truly unexpected errors; stack trace is logged server-side only."""
        request.app.state.logger.error(
            "unexpected error",
            exc_info=exc,
            extra={
                "request_id": request_id_var.get(),
                "method": request.method,
                "uri": request.url.path,
            },
        )
        return server_error_response()


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted.
        logger:   Logger injected into handlers and middleware. Defaults to
                  the "snippetbox" logger, unconfigured (the CLI configures
                  logging before calling this).

    Returns: Fully configured FastAPI instance ready to receive requests.

    Raises:  RuntimeError if the static directory is missing or two routes
             share a (method, path) pair.
    """
    settings = settings or Settings()
    logger = logger or logging.getLogger(LOGGER_NAME)

    app = FastAPI(
        title="Snippetbox",
        version=__version__,
        # HTML application: no generated API docs in the route table
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Dependencies (read back by snippetbox.dependencies) ───────────────
    app.state.settings = settings
    app.state.logger = logger
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → router
    app.add_middleware(RequestLoggingMiddleware, logger=logger)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # StaticFiles strips the mount prefix and serves the remainder from disk
    static = Mount(
        "/static",
        app=StaticFiles(directory=str(settings.static_dir)),
        name="static",
    )

    # Checked before anything is registered, from our own table rather than
    # app.router.routes, whose entries for included routers vary by version
    route_table = collect_routes(ROUTERS, static)
    assert_unique_routes(route_table)
    app.state.route_table = route_table

    for router in ROUTERS:
        app.include_router(router)
    app.router.routes.append(static)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# For `uvicorn snippetbox.main:app`; the CLI builds its own instance
app = create_app()
