"""Logging Configuration.

기본은 ECS 호환 JSON 로깅입니다 (LOG_FORMAT=text로 전환).
"""

from __future__ import annotations

from apps._shared.observability import configure_logging
from apps.sqs_worker.setup.config import get_settings


def setup_logging() -> None:
    """로깅 설정."""
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment=settings.environment,
        quiet_loggers=("botocore", "aiobotocore"),
    )
