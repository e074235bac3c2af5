"""Messaging Infrastructure.

SQS 발행 구현체입니다.
"""

from apps.sqs_api.infrastructure.messaging.sqs_publisher import SqsMessagePublisher

__all__ = ["SqsMessagePublisher"]
