"""
Correlation ID middleware for request tracing.

The ID is taken from the X-Request-ID header, or generated, bound to every
log line emitted while the request is handled, and echoed in the response.
"""

from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...infrastructure.logging import set_correlation_id

logger = structlog.get_logger()


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(
            "X-Request-ID",
            request.headers.get("X-Correlation-ID", str(uuid4())),
        )

        set_correlation_id(correlation_id)

        with structlog.contextvars.bound_contextvars(
            method=request.method,
            path=request.url.path,
        ):
            logger.info(
                "Request started",
                client_ip=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
            )

        response.headers["X-Request-ID"] = correlation_id
        return response
