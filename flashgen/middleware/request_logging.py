"""
Per-request correlation + access logging.

Accepts an upstream x-request-id (or mints one), exposes it to everything
downstream through the request context, and echoes it on the response so
clients can quote it in bug reports.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from flashgen.core.exception_handlers import unhandled_exception_handler
from flashgen.core.request_context import clear_context, set_context

logger = logging.getLogger("flashgen.http")

REQUEST_ID_HEADER = "x-request-id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        set_context(request_id=request_id)
        started = time.perf_counter()

        logger.info(
            "http.request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "client": request.client.host if request.client else None,
            },
        )
        try:
            response = await call_next(request)
        except Exception as exc:
            # Render here, while the request id is still in context
            response = await unhandled_exception_handler(request, exc)

        duration_ms = int((time.perf_counter() - started) * 1000)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "http.response",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        clear_context()
        return response
