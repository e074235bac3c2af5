"""Logging configuration."""

from __future__ import annotations

from apps._shared.observability import configure_logging
from apps.sqs_api.setup.config import get_settings

QUIET_LOGGERS = ("botocore", "aiobotocore", "uvicorn.access")


def setup_logging(level: str | None = None) -> None:
    """애플리케이션 로깅을 설정합니다.

    Args:
        level: 설정값 대신 사용할 로그 레벨 (local 환경에서 DEBUG 등)
    """
    settings = get_settings()
    configure_logging(
        level=level or settings.log_level,
        log_format=settings.log_format,
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment=settings.environment,
        quiet_loggers=QUIET_LOGGERS,
    )
