"""Messaging Infrastructure.

Kafka 발행 구현체입니다.
"""

from apps.kafka_api.infrastructure.messaging.kafka_publisher import KafkaMessagePublisher

__all__ = ["KafkaMessagePublisher"]
