"""
Snippetbox: Request Logging Middleware
=========================================

What:  One structured log line per HTTP request.
Why:   The access log is the only record of what the server did; handlers
       themselves only log failures.
How:   Measures the time spent in the rest of the stack and logs method,
       URI, protocol, status, duration, client IP and request ID as fields.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Example line (text format):
    time=... level=INFO msg="received request" ip=127.0.0.1 proto=HTTP/1.1 method=GET uri=/snippet/view/1 status=200 duration_ms=0.84 request_id=1a2b3c4d

What we DON'T log: request bodies and headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from snippetbox.middleware.request_id import request_id_var


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    The logger is passed in by create_app() rather than looked up by name,
    so tests can hand in any logger they like.

    Level by status class:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    """

    def __init__(self, app: ASGIApp, logger: logging.Logger):
        super().__init__(app)
        self.logger = logger

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"
        proto = "HTTP/" + request.scope.get("http_version", "1.1")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        self.logger.log(
            log_level,
            "received request",
            extra={
                "ip": client_ip,
                "proto": proto,
                "method": request.method,
                "uri": uri,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "request_id": request_id_var.get(),
            },
        )

        return response
