"""Configuration.

환경 변수 기반 설정입니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from apps._shared.messaging import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """SQS 워커 설정.

    환경 변수에서 로드됩니다.
    """

    # SQS
    queue_url: str
    aws_region: str | None = None
    endpoint_url: str | None = None
    max_number_of_messages: int = 10
    wait_time_seconds: int = 20

    # Worker
    error_backoff_seconds: float = 5.0
    processing_delay_seconds: float = 0.1
    metrics_port: int = 0

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Service
    service_name: str = "sqs-worker"
    service_version: str = "1.0.0"
    environment: str = "dev"


def _require(name: str, message: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigurationError(message)
    return value


def _number(name: str, default: str, cast: type[int] | type[float]) -> int | float:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 반환.

    Raises:
        ConfigurationError: SQS_QUEUE_URL 미설정 또는 숫자 형식 오류
    """
    return Settings(
        queue_url=_require("SQS_QUEUE_URL", "SQS Queue URL is not configured"),
        aws_region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or None,
        endpoint_url=os.getenv("SQS_ENDPOINT_URL") or None,
        max_number_of_messages=_number("SQS_MAX_NUMBER_OF_MESSAGES", "10", int),
        wait_time_seconds=_number("SQS_WAIT_TIME_SECONDS", "20", int),
        error_backoff_seconds=_number("WORKER_ERROR_BACKOFF_SECONDS", "5.0", float),
        processing_delay_seconds=_number("PROCESSING_DELAY_SECONDS", "0.1", float),
        metrics_port=_number("METRICS_PORT", "0", int),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
        service_name=os.getenv("SERVICE_NAME", "sqs-worker"),
        service_version=os.getenv("SERVICE_VERSION", "1.0.0"),
        environment=os.getenv("ENVIRONMENT", "dev"),
    )
