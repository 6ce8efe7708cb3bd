"""
Afterclass API: Request Logging Middleware
===========================================

What:  One access-log line per HTTP request.
How:   Measures time around the downstream call and logs method, path
       (with query string), status, duration, request ID and client IP.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Log line:
    2024-01-15T12:00:00 [INFO] afterclass.access: GET /search?q=math 200 3.2ms [a1b2c3d4] from 127.0.0.1

Request bodies are never logged (orders carry names and phone numbers).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from afterclass.middleware.request_id import request_id_var

logger = logging.getLogger("afterclass.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request after the response is produced.

    Levels: 5xx → ERROR, 4xx → WARNING, everything else → INFO.
    /health is skipped; probes hit it every few seconds.
    """

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        target = f"{path}?{request.url.query}" if request.url.query else path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            target,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
