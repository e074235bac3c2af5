"""Application DTOs."""

from apps.sqs_api.application.common.dto.send_result import SendResult

__all__ = ["SendResult"]
