"""Application DTOs."""

from apps.kafka_worker.application.common.dto.consumed_record import ConsumedRecord

__all__ = ["ConsumedRecord"]
