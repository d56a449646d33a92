"""
Snippetbox: Snippet Route Handlers
=====================================

What:  Placeholder handlers for the snippet resource.
Why:   The routes exist so the URL space is fixed before storage does;
       none of them reads or writes any data yet.

Route Inventory:
    GET  /snippet/view/{id}   echo a positive integer id, 404 otherwise
    GET  /snippet/create      placeholder for the create form
    POST /snippet/create      placeholder for the create action, 201
"""

import re

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from snippetbox.exceptions import NotFoundError

router = APIRouter(prefix="/snippet", tags=["Snippets"])

# Optional sign and ASCII digits only; int() alone would also accept
# surrounding whitespace, underscores and non-ASCII digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Ids are signed 64-bit integers
MAX_SNIPPET_ID = 2**63 - 1
_MAX_DIGITS = len(str(MAX_SNIPPET_ID))


def parse_snippet_id(raw: str) -> int:
    """
    Parse a snippet identifier taken from the URL path.

    Returns: The identifier as an int in 1..MAX_SNIPPET_ID.
    Raises:  NotFoundError if the value is empty, not an integer, < 1 or
             out of the 64-bit range. A bad id in the URL names a page that
             does not exist, so it is reported as 404 rather than 400.
    """
    if not _INTEGER_RE.fullmatch(raw):
        raise NotFoundError(resource="snippet", resource_id=raw)

    # Length check first: int() refuses digit strings past its conversion limit
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_DIGITS:
        raise NotFoundError(resource="snippet", resource_id=raw)

    snippet_id = int(raw)
    if snippet_id < 1 or snippet_id > MAX_SNIPPET_ID:
        raise NotFoundError(resource="snippet", resource_id=raw)
    return snippet_id


@router.api_route(
    "/view/{id}",
    methods=["GET", "HEAD"],
    response_class=PlainTextResponse,
    summary="View a snippet",
)
async def snippet_view(id: str) -> PlainTextResponse:
    snippet_id = parse_snippet_id(id)
    return PlainTextResponse(f"Display a specific snippet with ID {snippet_id}...")


@router.api_route(
    "/create",
    methods=["GET", "HEAD"],
    response_class=PlainTextResponse,
    summary="Show the snippet creation form",
)
async def snippet_create() -> PlainTextResponse:
    return PlainTextResponse("Display a form for creating a new snippet...")


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    summary="Create a snippet",
)
async def snippet_create_post() -> PlainTextResponse:
    """
    Accept a new snippet.

    The request body is not read; nothing is stored. Always answers
    201 Created so clients can be built against the final contract.
    """
    return PlainTextResponse(
        "Save a new snippet...", status_code=status.HTTP_201_CREATED
    )
