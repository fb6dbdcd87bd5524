"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, talentiq.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from talentiq.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATHS = frozenset({"/api/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request on completion with status and duration.

    Liveness probes are not logged. Failures escaping the app are logged
    with traceback and re-raised.
    """

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        fields = {
            "method": request.method,
            "path": path,
            "client_host": request.client.host if request.client else None,
        }
        try:
            response: Response = await call_next(request)
        except Exception as e:
            fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            logger.exception(
                f"{request.method} {path} failed",
                extra={**fields, "error_type": type(e).__name__},
            )
            raise

        fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        fields["status_code"] = response.status_code
        logger.info(f"{request.method} {path} {response.status_code}", extra=fields)
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
