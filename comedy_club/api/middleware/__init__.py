"""
API Middleware module.

Contains middleware for:
- Request logging
"""

from comedy_club.api.middleware.logging import LoggingConfig, RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
    "LoggingConfig",
]
