"""Configuration.

환경 변수 기반 설정입니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from apps._shared.messaging import ConfigurationError

AUTO_OFFSET_RESET_CHOICES = ("earliest", "latest")


@dataclass(frozen=True)
class Settings:
    """Kafka 워커 설정.

    환경 변수에서 로드됩니다.
    """

    # Kafka
    bootstrap_servers: str
    topic: str
    group_id: str = "kafka-message-consumer-group"
    commit_batch_size: int = 10
    poll_timeout_ms: int = 1000
    max_poll_records: int = 100
    auto_offset_reset: str = "earliest"

    # Worker
    error_backoff_seconds: float = 5.0
    processing_delay_seconds: float = 0.1
    metrics_port: int = 0

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Service
    service_name: str = "kafka-worker"
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
        ConfigurationError: 필수 값 누락, 숫자 형식 오류, 허용되지 않는 값
    """
    commit_batch_size = _number("KAFKA_COMMIT_BATCH_SIZE", "10", int)
    if commit_batch_size < 1:
        raise ConfigurationError("KAFKA_COMMIT_BATCH_SIZE must be at least 1")

    auto_offset_reset = os.getenv("KAFKA_AUTO_OFFSET_RESET", "earliest").lower()
    if auto_offset_reset not in AUTO_OFFSET_RESET_CHOICES:
        raise ConfigurationError(
            f"KAFKA_AUTO_OFFSET_RESET must be one of {AUTO_OFFSET_RESET_CHOICES}, "
            f"got {auto_offset_reset!r}"
        )

    return Settings(
        bootstrap_servers=_require(
            "KAFKA_BOOTSTRAP_SERVERS", "Kafka Bootstrap Servers are not configured"
        ),
        topic=_require("KAFKA_TOPIC", "Kafka Topic is not configured"),
        group_id=os.getenv("KAFKA_GROUP_ID") or "kafka-message-consumer-group",
        commit_batch_size=commit_batch_size,
        poll_timeout_ms=_number("KAFKA_POLL_TIMEOUT_MS", "1000", int),
        max_poll_records=_number("KAFKA_MAX_POLL_RECORDS", "100", int),
        auto_offset_reset=auto_offset_reset,
        error_backoff_seconds=_number("WORKER_ERROR_BACKOFF_SECONDS", "5.0", float),
        processing_delay_seconds=_number("PROCESSING_DELAY_SECONDS", "0.1", float),
        metrics_port=_number("METRICS_PORT", "0", int),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
        service_name=os.getenv("SERVICE_NAME", "kafka-worker"),
        service_version=os.getenv("SERVICE_VERSION", "1.0.0"),
        environment=os.getenv("ENVIRONMENT", "dev"),
    )
