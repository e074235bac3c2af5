"""Messaging Infrastructure.

Kafka 구독/커밋 구현체입니다.
"""

from apps.kafka_worker.infrastructure.messaging.kafka_client import KafkaConsumerClient

__all__ = ["KafkaConsumerClient"]
