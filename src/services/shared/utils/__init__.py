from .http_response import (
    api_response,
    cors_headers,
    error_response,
    preflight_response,
)
from .validators import is_blank, to_decimal

__all__ = [
    "api_response",
    "cors_headers",
    "error_response",
    "preflight_response",
    "is_blank",
    "to_decimal",
]
