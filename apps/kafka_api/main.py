"""Kafka Message API - FastAPI application entry point.

Architecture:
    POST /api/message
        │
        │ {"id": "..."}
        ▼
    SendMessageCommand (Application)
        │
        │ MessageEnvelope {"Id", "Timestamp"}, key=Id
        ▼
    KafkaMessagePublisher (Infrastructure)
        │
        └── produce + ack → "topic-partition-offset"

Run:
    python -m apps.kafka_api.main
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps._shared.messaging import BrokerUnavailableError
from apps._shared.observability import register_http_metrics
from apps.kafka_api.presentation.http.controllers import health_router, message_router
from apps.kafka_api.presentation.http.errors import register_exception_handlers
from apps.kafka_api.setup.config import get_settings
from apps.kafka_api.setup.dependencies import build_publisher
from apps.kafka_api.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    settings = get_settings()

    # Startup
    setup_logging("DEBUG" if settings.environment == "local" else None)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    # Bootstrap Servers/Topic이 없으면 ConfigurationError로 기동 중단
    publisher = build_publisher(settings)
    try:
        await publisher.connect()
    except BrokerUnavailableError:
        # 브로커 미기동은 치명적이지 않음. 첫 publish()에서 다시 연결 (실패 시 500)
        logger.warning("Kafka broker unavailable at startup", exc_info=True)
    app.state.publisher = publisher

    try:
        yield
    finally:
        # Shutdown (producer.stop()이 남은 전송을 flush)
        logger.info(f"Shutting down {settings.app_name}")
        await publisher.close()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.service_version,
        description="Produces single-field messages to a Kafka topic",
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    register_http_metrics(app)

    app.include_router(health_router)
    app.include_router(message_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.kafka_api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=get_settings().environment == "local",
    )
