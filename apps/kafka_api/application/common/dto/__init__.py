"""Application DTOs."""

from apps.kafka_api.application.common.dto.send_result import SendResult

__all__ = ["SendResult"]
