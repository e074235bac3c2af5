"""Messaging Infrastructure.

SQS 수신/삭제 구현체입니다.
"""

from apps.sqs_worker.infrastructure.messaging.sqs_client import SqsQueueClient

__all__ = ["SqsQueueClient"]
