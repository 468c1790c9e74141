"""Correlation and request identifiers for every HTTP request.

The correlation ID is taken from the ``X-Correlation-ID`` header when the
caller supplies one, so logs can be joined across services; otherwise a
fresh one is generated. The request ID is always generated here and
identifies this single request. Both are stored in contextvars, bound to
every loguru record emitted while the request runs, and echoed back in
the response headers.
"""

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.api.constants import CORRELATION_ID_HEADER, REQUEST_ID_HEADER
from src.core.context import (
    RequestContext,
    generate_correlation_id,
    generate_request_id,
)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to manage request context and correlation IDs."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process the request with context management.

        Args:
            request: The incoming request.
            call_next: The next middleware/endpoint.

        Returns:
            Response: Response with correlation and request ID headers.
        """
        correlation_id = (
            request.headers.get(CORRELATION_ID_HEADER) or generate_correlation_id()
        )
        request_id = generate_request_id()

        RequestContext.set_correlation_id(correlation_id)
        RequestContext.set_request_id(request_id)

        # contextualize scopes the binding to this request only
        with logger.contextualize(correlation_id=correlation_id, request_id=request_id):
            try:
                response = await call_next(request)
            finally:
                RequestContext.clear()

            response.headers[CORRELATION_ID_HEADER] = correlation_id
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
