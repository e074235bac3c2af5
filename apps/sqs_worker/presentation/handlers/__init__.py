"""Message handlers."""

from apps.sqs_worker.presentation.handlers.message_handler import MessageHandler

__all__ = ["MessageHandler"]
