# colholidays/core/request_logging.py
"""
Request logging middleware for tracking all HTTP requests.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from colholidays.core.logging_config import get_logger, request_id_var

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every HTTP request with timing and status code.

    The request id (taken from an incoming X-Request-ID header, or a new
    uuid4) is bound to request_id_var for the whole request, so resolver
    and route logs carry it too. It is echoed back in X-Request-ID.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception:
            logger.exception(
                "%s %s raised",
                request.method,
                request.url.path,
                extra={"extra_fields": {"method": request.method, "path": request.url.path}},
            )
            raise
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            extra = {
                "extra_fields": {
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": round(duration_ms, 2),
                }
            }
            args = (request.method, request.url.path, status_code, duration_ms)

            if status_code >= 500:
                logger.error("%s %s - %d (%.2fms)", *args, extra=extra)
            elif status_code >= 400:
                logger.warning("%s %s - %d (%.2fms)", *args, extra=extra)
            elif request.url.path == "/health":
                logger.debug("%s %s - %d (%.2fms)", *args, extra=extra)
            else:
                logger.info("%s %s - %d (%.2fms)", *args, extra=extra)
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        return response
