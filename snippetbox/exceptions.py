"""
Snippetbox: Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the two failure classes a
       request can hit.
Why:   Handlers raise; the exception handlers registered in main.py decide
       the status code and body. No handler writes an error response itself.
How:   Each exception carries a message and an optional context dict. The
       context is logged server-side and never returned to the client.

Exception Hierarchy:
    SnippetboxError (base)
    ├── NotFoundError        → 404 "404 page not found"
    └── TemplateRenderError  → 500 "Internal Server Error"

Startup failures (listen errors) are not exceptions of this hierarchy:
they end the process with exit status 1 (see __main__.py).
"""

from typing import Any, Dict, Optional


class SnippetboxError(Exception):
    """
    Base exception for all Snippetbox application errors.

    Attributes:
        message:  Description of the failure (for logs)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(SnippetboxError):
    """
    Raised when a request names something that does not exist.

    When:    /snippet/view/{id} with an id that is not an integer >= 1.
    HTTP:    404 Not Found, same body as an unmatched route.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class TemplateRenderError(SnippetboxError):
    """
    Raised when a page cannot be composed from its templates.

    When:    Missing template file, syntax error, or a failure while rendering.
    HTTP:    500 Internal Server Error with a generic body. The underlying
             Jinja2 error is logged server-side only.
    """

    def __init__(
        self,
        template: str,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["template"] = template
        if cause is not None:
            ctx["error"] = f"{type(cause).__name__}: {cause}"
        super().__init__(message=f"Failed to render template '{template}'", context=ctx)
