"""Observability helpers shared across services."""

from .logging import configure_logging
from .metrics import (
    MESSAGES_CONSUMED_TOTAL,
    MESSAGES_PUBLISHED_TOTAL,
    PROMETHEUS_METRICS_PATH,
    REGISTRY,
    register_http_metrics,
    start_metrics_server,
)

__all__ = [
    "MESSAGES_CONSUMED_TOTAL",
    "MESSAGES_PUBLISHED_TOTAL",
    "PROMETHEUS_METRICS_PATH",
    "REGISTRY",
    "configure_logging",
    "register_http_metrics",
    "start_metrics_server",
]
