"""Application configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Kafka Message API 설정."""

    app_name: str = "Kafka Message API"
    service_name: str = Field(
        "kafka-api",
        validation_alias=AliasChoices("SERVICE_NAME", "KAFKA_API_SERVICE_NAME"),
    )
    service_version: str = Field(
        "1.0.0",
        validation_alias=AliasChoices("SERVICE_VERSION", "KAFKA_API_SERVICE_VERSION"),
    )
    environment: str = Field(
        "local",
        validation_alias=AliasChoices("ENVIRONMENT", "ENV"),
    )

    # Kafka
    bootstrap_servers: str | None = Field(
        None,
        validation_alias=AliasChoices("KAFKA_BOOTSTRAP_SERVERS"),
        description="host:port[,host:port...]",
    )
    topic: str | None = Field(
        None,
        validation_alias=AliasChoices("KAFKA_TOPIC"),
        description="발행 대상 토픽",
    )
    client_id: str = Field(
        "kafka-message-producer",
        validation_alias=AliasChoices("KAFKA_CLIENT_ID"),
    )

    # Logging
    log_level: str = Field("INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    log_format: str = Field(
        "text",
        validation_alias=AliasChoices("LOG_FORMAT"),
        description="text | json (ECS)",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스를 반환합니다."""
    return Settings()
