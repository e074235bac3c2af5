from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
    start_http_server,
)

PROMETHEUS_METRICS_PATH = "/metrics"
_FLAG_ATTR = "_observability_metrics_registered"

# 전역 레지스트리 (API/Worker 공용)
REGISTRY = CollectorRegistry(auto_describe=True)

MESSAGES_PUBLISHED_TOTAL = Counter(
    "messages_published_total",
    "Messages handed to the broker by the producer API",
    ["broker", "status"],  # status: success, rejected, misconfigured, failed
    registry=REGISTRY,
)

MESSAGES_CONSUMED_TOTAL = Counter(
    "messages_consumed_total",
    "Messages handled by the consumer worker",
    ["broker", "outcome"],  # outcome: processed, dropped, retried
    registry=REGISTRY,
)


def register_http_metrics(
    app: FastAPI,
    *,
    metrics_path: str = PROMETHEUS_METRICS_PATH,
) -> None:
    """Attach /metrics route to expose Prometheus counters."""
    if getattr(app.state, _FLAG_ATTR, False):
        return

    @app.get(metrics_path, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        payload = generate_latest(REGISTRY)
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    setattr(app.state, _FLAG_ATTR, True)


def start_metrics_server(port: int) -> bool:
    """Worker용 /metrics HTTP 서버 기동 (port=0이면 비활성)."""
    if port <= 0:
        return False
    start_http_server(port, registry=REGISTRY)
    return True
