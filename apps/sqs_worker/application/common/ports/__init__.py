"""Application Ports."""

from apps.sqs_worker.application.common.ports.message_queue import MessageQueue

__all__ = ["MessageQueue"]
