# Middleware package init
"""
Afterclass API: Middleware Package
===================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Responses pass back through the chain in reverse, so the logging
    middleware sees the final status code and the request ID middleware adds
    the X-Request-ID header last.
"""
