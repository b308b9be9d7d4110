"""Prometheus metrics for NexLink.

Provides metrics collection and exposure:
- HTTP request metrics (latency, count)
- Identifier decode failures by resource

Usage:
    from nexlink.observability.metrics import get_metrics

    metrics = get_metrics()
    metrics.id_decode_failures_total.labels(resource="User").inc()
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from prometheus_client import REGISTRY, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from nexlink.config import settings

if TYPE_CHECKING:
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

# Collections whose next path segment is an identifier token
_ID_COLLECTIONS = frozenset({"users", "investors"})


@dataclass
class MetricsRegistry:
    """Registry for Prometheus metrics."""

    http_requests_total: Any = None
    http_request_duration_seconds: Any = None
    id_decode_failures_total: Any = None

    _initialized: bool = field(default=False, repr=False)
    _registry: Any = field(default=None, repr=False)

    def initialize(self) -> None:
        """Initialize Prometheus metrics."""
        if self._initialized:
            return

        if not settings.enable_metrics:
            logger.info("Metrics are disabled")
            self._initialized = True
            return

        self._registry = REGISTRY

        self.http_requests_total = Counter(
            "nexlink_http_requests_total",
            "Total HTTP requests",
            ["method", "path", "status"],
        )

        self.http_request_duration_seconds = Histogram(
            "nexlink_http_request_duration_seconds",
            "HTTP request latency in seconds",
            ["method", "path"],
            buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
        )

        self.id_decode_failures_total = Counter(
            "nexlink_id_decode_failures_total",
            "Identifier tokens rejected at the API boundary",
            ["resource"],
        )

        self._initialized = True
        logger.info("Prometheus metrics initialized")

    def generate_latest(self) -> bytes:
        """Generate Prometheus metrics in exposition format."""
        if not settings.enable_metrics or self._registry is None:
            return b"# Metrics disabled\n"
        return generate_latest(self._registry)


metrics_registry = MetricsRegistry()


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry, initializing it on first access."""
    if not metrics_registry._initialized:
        metrics_registry.initialize()
    return metrics_registry


def record_decode_failure(resource: str) -> None:
    metrics = get_metrics()
    if metrics.id_decode_failures_total:
        metrics.id_decode_failures_total.labels(resource=resource).inc()


def normalize_path(path: str) -> str:
    """Replace the identifier token after a resource collection with a placeholder.

    Examples:
        /users/MQ== -> /users/{id}
        /investors/NjA=/unlock-status -> /investors/{id}/unlock-status
        /docs -> /docs
    """
    parts = path.strip("/").split("/")
    if parts == [""]:
        return "/"
    normalized = [
        "{id}" if index and parts[index - 1] in _ID_COLLECTIONS else part
        for index, part in enumerate(parts)
    ]
    return "/" + "/".join(normalized)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for HTTP request metrics."""

    def __init__(self, app: "ASGIApp") -> None:
        super().__init__(app)
        self.metrics = get_metrics()

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        if request.url.path in ("/health", "/metrics"):
            return await call_next(request)

        method = request.method
        path = normalize_path(request.url.path)

        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.perf_counter() - start_time

            if self.metrics.http_requests_total:
                self.metrics.http_requests_total.labels(
                    method=method,
                    path=path,
                    status=status_code,
                ).inc()

            if self.metrics.http_request_duration_seconds:
                self.metrics.http_request_duration_seconds.labels(
                    method=method,
                    path=path,
                ).observe(duration)
