"""Application Commands."""

from apps.sqs_worker.application.commands.process_message import ProcessMessageCommand

__all__ = ["ProcessMessageCommand"]
