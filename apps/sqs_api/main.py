"""SQS Message API - FastAPI application entry point.

Architecture:
    POST /api/message
        │
        │ {"id": "..."}
        ▼
    SendMessageCommand (Application)
        │
        │ MessageEnvelope {"Id", "Timestamp"}
        ▼
    SqsMessagePublisher (Infrastructure)
        │
        └── SQS SendMessage → MessageId

Run:
    python -m apps.sqs_api.main
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps._shared.observability import register_http_metrics
from apps.sqs_api.presentation.http.controllers import health_router, message_router
from apps.sqs_api.presentation.http.errors import register_exception_handlers
from apps.sqs_api.setup.config import get_settings
from apps.sqs_api.setup.dependencies import build_publisher
from apps.sqs_api.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    settings = get_settings()

    # Startup
    setup_logging("DEBUG" if settings.environment == "local" else None)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    # Queue URL이 없으면 ConfigurationError로 기동 중단
    publisher = build_publisher(settings)
    await publisher.connect()
    app.state.publisher = publisher

    try:
        yield
    finally:
        # Shutdown
        logger.info(f"Shutting down {settings.app_name}")
        await publisher.close()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.service_version,
        description="Publishes single-field messages to an SQS queue",
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    register_http_metrics(app)

    # 라우터 등록
    app.include_router(health_router)  # /health, /ping (prefix 없음)
    app.include_router(message_router)  # /api/message

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.sqs_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().environment == "local",
    )
