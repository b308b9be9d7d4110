"""Observability module for NexLink.

Provides metrics and structured logging:
- Prometheus metrics
- JSON structured logging with correlation IDs
"""

from nexlink.observability.logging import (
    configure_logging,
    correlation_id_var,
    request_id_var,
    user_id_var,
)
from nexlink.observability.metrics import (
    MetricsMiddleware,
    get_metrics,
    metrics_registry,
    record_decode_failure,
)

__all__ = [
    # Logging
    "configure_logging",
    "request_id_var",
    "correlation_id_var",
    "user_id_var",
    # Metrics
    "metrics_registry",
    "get_metrics",
    "record_decode_failure",
    "MetricsMiddleware",
]
