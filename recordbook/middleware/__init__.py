"""
Recordbook: Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    The request ID is set first so the access log line can carry it.
    On the way out the logging middleware sees the final status code and
    the request ID middleware adds the X-Request-ID header.
"""
