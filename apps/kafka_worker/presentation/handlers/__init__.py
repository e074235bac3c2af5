"""Message handlers."""

from apps.kafka_worker.presentation.handlers.message_handler import MessageHandler

__all__ = ["MessageHandler"]
