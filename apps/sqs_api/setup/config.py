"""Application configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SQS Message API 설정."""

    app_name: str = "SQS Message API"
    service_name: str = Field(
        "sqs-api",
        validation_alias=AliasChoices("SERVICE_NAME", "SQS_API_SERVICE_NAME"),
    )
    service_version: str = Field(
        "1.0.0",
        validation_alias=AliasChoices("SERVICE_VERSION", "SQS_API_SERVICE_VERSION"),
    )
    environment: str = Field(
        "local",
        validation_alias=AliasChoices("ENVIRONMENT", "ENV"),
    )

    # SQS
    queue_url: str | None = Field(
        None,
        validation_alias=AliasChoices("SQS_QUEUE_URL", "AWS_SQS_QUEUE_URL"),
        description="발행 대상 SQS Queue URL",
    )
    aws_region: str | None = Field(
        None,
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
        description="미지정 시 AWS SDK 기본 체인 사용",
    )
    endpoint_url: str | None = Field(
        None,
        validation_alias=AliasChoices("SQS_ENDPOINT_URL", "AWS_ENDPOINT_URL"),
        description="LocalStack 등 커스텀 엔드포인트",
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
