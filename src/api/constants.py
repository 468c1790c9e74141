"""API-related constants."""

API_PREFIX = "/api"

# HTTP Headers
CORRELATION_ID_HEADER = "X-Correlation-ID"
REQUEST_ID_HEADER = "X-Request-ID"

# Security
DEFAULT_HSTS_MAX_AGE = 31536000  # 1 year in seconds

MAX_USER_AGENT_LENGTH = 200
