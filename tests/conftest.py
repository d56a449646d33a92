"""
Snippetbox: Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── settings: Default Settings (package ui/ directory)
    ├── test_logger: Logger injected into the app under test
    ├── app: Application built by create_app() with the test logger
    ├── test_client: HTTPX AsyncClient for endpoint testing
    └── broken_ui_dir: ui/ tree whose home page cannot be composed
"""

import logging

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from snippetbox.config import Settings
from snippetbox.main import create_app

TEST_LOGGER_NAME = "snippetbox.test"


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def test_logger():
    """
    Logger handed to create_app().

    Propagates to the root logger, so `caplog` sees every record the
    handlers and middleware emit.
    """
    return logging.getLogger(TEST_LOGGER_NAME)


@pytest.fixture
def app(settings, test_logger):
    return create_app(settings=settings, logger=test_logger)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to our FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def broken_ui_dir(tmp_path):
    """
    A ui/ tree with a static directory but a home page that extends a
    base layout which does not exist.
    """
    (tmp_path / "static").mkdir()
    (tmp_path / "static" / "robots.txt").write_text("User-agent: *\n")
    pages = tmp_path / "html" / "pages"
    pages.mkdir(parents=True)
    (pages / "home.tmpl.html").write_text(
        '{% extends "missing.tmpl.html" %}{% block main %}hi{% endblock %}'
    )
    return tmp_path
