"""Application Commands."""

from apps.sqs_api.application.commands.send_message import SendMessageCommand

__all__ = ["SendMessageCommand"]
