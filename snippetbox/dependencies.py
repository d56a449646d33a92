"""
Snippetbox: Request Dependencies
===================================

What:  FastAPI dependency providers for the capabilities handlers need.
Why:   Handlers receive their logger and template set as parameters instead
       of importing globals, so each handler can be exercised in isolation
       (override the dependency, or build an app with a different logger).
How:   create_app() stores the capabilities on app.state; these providers
       read them back from the request's application.
"""

import logging

from fastapi import Request
from fastapi.templating import Jinja2Templates


def get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
