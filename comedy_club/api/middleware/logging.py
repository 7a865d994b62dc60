"""
Request logging middleware.

Tags every response with an X-Request-ID and writes one log line per
request: matched route, joke id when the route carries one, status and
latency.

Sandi Metz Principles:
- Single Responsibility: Request/response logging
- Non-intrusive: Doesn't modify request/response bodies
- Configurable: Exclusions and slow threshold come from AppConfig
"""

import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from comedy_club.config import AppConfig
from comedy_club.utils.logger import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64


@dataclass(frozen=True)
class LoggingConfig:
    """Request logging configuration."""

    enabled: bool = True
    excluded_paths: Tuple[str, ...] = ("/health",)
    slow_request_threshold_ms: float = 1000.0

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "LoggingConfig":
        """Build from application settings."""
        return cls(
            excluded_paths=tuple(app_config.request_log_excluded_paths_list),
            slow_request_threshold_ms=app_config.slow_request_threshold_ms,
        )


def route_context(request: Request) -> Dict[str, Any]:
    """
    Describe the route a request was dispatched to.

    Routing fills ``route`` and ``path_params`` in the shared scope, so
    this is only populated after the downstream app has run.

    Args:
        request: Incoming request

    Returns:
        ``route`` template and ``joke_id`` where known
    """
    context: Dict[str, Any] = {}
    route = request.scope.get("route")
    if route is not None:
        context["route"] = getattr(route, "path", str(route))
    joke_id = request.scope.get("path_params", {}).get("joke_id")
    if joke_id:
        context["joke_id"] = joke_id
    return context


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for request/response logging."""

    def __init__(self, app, config: Optional[LoggingConfig] = None):
        """
        Initialize middleware.

        Args:
            app: FastAPI application
            config: Logging configuration
        """
        super().__init__(app)
        self._config = config or LoggingConfig()

    def _request_id(self, request: Request) -> str:
        """Reuse the caller's request id, or generate a short one."""
        incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if incoming:
            return incoming[:MAX_REQUEST_ID_LENGTH]
        return uuid.uuid4().hex[:8]

    def _should_log(self, path: str) -> bool:
        """Check if path should be logged."""
        if not self._config.enabled:
            return False
        return path not in self._config.excluded_paths

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request with logging.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response carrying the request id header
        """
        request_id = self._request_id(request)

        if not self._should_log(request.url.path):
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                error=str(e),
                **route_context(request),
            )
            raise

        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        event = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": duration_ms,
            **route_context(request),
        }

        if duration_ms > self._config.slow_request_threshold_ms:
            logger.warning("Slow request", **event)
        else:
            logger.info("Request completed", **event)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
