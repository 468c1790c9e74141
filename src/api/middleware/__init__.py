"""Middleware for cross-cutting request/response concerns.

- **SecurityHeadersMiddleware**: Browser hardening headers
- **RequestContextMiddleware**: Correlation and request IDs
- **RequestLoggingMiddleware**: Request logging with timing
- **error_handler**: Exception handlers mapping errors to status codes

Order, outermost first: CORS, security headers, request context, request
logging. Exception handlers run inside all of them, so error responses
still carry the CORS and ID headers.
"""
