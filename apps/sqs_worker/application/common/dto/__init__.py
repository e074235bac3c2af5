"""Application DTOs."""

from apps.sqs_worker.application.common.dto.received_message import ReceivedMessage

__all__ = ["ReceivedMessage"]
