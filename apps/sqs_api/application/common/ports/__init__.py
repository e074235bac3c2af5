"""Application Ports."""

from apps.sqs_api.application.common.ports.message_publisher import MessagePublisher

__all__ = ["MessagePublisher"]
