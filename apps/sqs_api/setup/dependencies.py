"""Dependency injection setup."""

from __future__ import annotations

from fastapi import Depends, Request

from apps.sqs_api.application.commands import SendMessageCommand
from apps.sqs_api.application.common.ports import MessagePublisher
from apps.sqs_api.infrastructure.messaging import SqsMessagePublisher
from apps.sqs_api.setup.config import Settings


def build_publisher(settings: Settings) -> SqsMessagePublisher:
    """설정으로 SQS 발행자를 생성합니다."""
    return SqsMessagePublisher(
        settings.queue_url,
        region_name=settings.aws_region,
        endpoint_url=settings.endpoint_url,
    )


def get_publisher(request: Request) -> MessagePublisher:
    """lifespan에서 연결해 둔 발행자를 반환합니다."""
    return request.app.state.publisher


def get_send_message_command(
    publisher: MessagePublisher = Depends(get_publisher),
) -> SendMessageCommand:
    """SendMessageCommand 인스턴스를 반환합니다."""
    return SendMessageCommand(publisher)
