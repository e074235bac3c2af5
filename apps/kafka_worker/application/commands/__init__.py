"""Application Commands."""

from apps.kafka_worker.application.commands.process_message import ProcessMessageCommand

__all__ = ["ProcessMessageCommand"]
