"""Application Ports."""

from apps.kafka_api.application.common.ports.message_publisher import MessagePublisher

__all__ = ["MessagePublisher"]
