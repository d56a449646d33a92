# Middleware package init
"""
Snippetbox: Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Router → Handler

    1. Request ID first: every later log line can be correlated
    2. Logging: records status and duration once the handler has answered
"""
