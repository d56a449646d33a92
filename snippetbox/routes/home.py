"""
Snippetbox: Home Page Route
==============================

What:  Handles GET / (exact root only).
How:   Renders pages/home.tmpl.html. The page template extends the base
       layout (base.tmpl.html), which includes the navigation partial
       (partials/nav.tmpl.html), so one render composes all three files.

Failure handling:
    Any failure while loading or rendering the templates (missing file,
    Jinja2 syntax error, an exception raised by a filter) is converted to
    TemplateRenderError. The global handler in main.py logs the cause and
    answers 500 with a generic body.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from snippetbox.dependencies import get_logger, get_templates
from snippetbox.exceptions import TemplateRenderError

router = APIRouter(tags=["Pages"])

HOME_TEMPLATE = "pages/home.tmpl.html"


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="Home page",
)
async def home(
    request: Request,
    logger: logging.Logger = Depends(get_logger),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    """Render the home page from the base layout, nav partial and page fragment."""
    try:
        # TemplateResponse renders eagerly, so every Jinja2 failure surfaces here
        response = templates.TemplateResponse(
            request,
            HOME_TEMPLATE,
            {"current_year": datetime.now().year},
        )
    except Exception as exc:
        raise TemplateRenderError(template=HOME_TEMPLATE, cause=exc) from exc

    logger.debug("rendered page", extra={"template": HOME_TEMPLATE})
    return response
