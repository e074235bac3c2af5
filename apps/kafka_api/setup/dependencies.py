"""Dependency injection setup."""

from __future__ import annotations

from fastapi import Depends, Request

from apps.kafka_api.application.commands import SendMessageCommand
from apps.kafka_api.application.common.ports import MessagePublisher
from apps.kafka_api.infrastructure.messaging import KafkaMessagePublisher
from apps.kafka_api.setup.config import Settings


def build_publisher(settings: Settings) -> KafkaMessagePublisher:
    """설정으로 Kafka 발행자를 생성합니다."""
    return KafkaMessagePublisher(
        settings.bootstrap_servers,
        settings.topic,
        client_id=settings.client_id,
    )


def get_publisher(request: Request) -> MessagePublisher:
    """lifespan에서 연결해 둔 발행자를 반환합니다."""
    return request.app.state.publisher


def get_send_message_command(
    publisher: MessagePublisher = Depends(get_publisher),
) -> SendMessageCommand:
    """SendMessageCommand 인스턴스를 반환합니다."""
    return SendMessageCommand(publisher)
