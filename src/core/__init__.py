"""Core infrastructure package for shared application functionality.

- **config**: Settings loaded from environment variables and .env files
- **context**: Correlation ID storage for the current request
- **exceptions**: Error codes, severities and the exception hierarchy
- **error_context**: Sanitization of error context before logging
- **logging**: Loguru setup with console and structured formatters
- **observability**: OpenTelemetry tracing setup and helpers
"""
