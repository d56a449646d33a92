"""
Snippetbox: Application Package
==================================

What: A small server-rendered web application skeleton for sharing text
      snippets: router, placeholder handlers, structured logging.

Architecture Note:

    ┌─────────────────────────────────────┐
    │        CLI (__main__.py)            │  ← flags, logging setup, uvicorn
    ├─────────────────────────────────────┤
    │   Application factory (main.py)     │  ← wiring, middleware, errors
    ├─────────────────────────────────────┤
    │         Routes (routes/)            │  ← HTTP handlers
    ├─────────────────────────────────────┤
    │   Templates & static files (ui/)    │  ← Jinja2 pages, CSS, JS
    └─────────────────────────────────────┘

There is no service or persistence layer yet; the snippet handlers are
placeholders.
"""

__version__ = "0.1.0"
