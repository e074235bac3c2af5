"""Application Commands."""

from apps.kafka_api.application.commands.send_message import SendMessageCommand

__all__ = ["SendMessageCommand"]
