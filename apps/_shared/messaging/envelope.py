"""Message Envelope.

SQS 메시지 본문과 Kafka 레코드 값에 동일하게 실리는 wire 포맷입니다.

    {"Id": "order-42", "Timestamp": "2024-01-01T00:00:00Z"}

- Id: 클라이언트가 보낸 값 그대로 (producer → consumer 왕복 불변)
- Timestamp: 발행 시각 (UTC), 소비 시각이 아님
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from apps._shared.messaging.errors import MalformedMessageError


class MessageEnvelope(BaseModel):
    """브로커 메시지 Envelope."""

    id: str = Field(..., alias="Id", description="클라이언트 메시지 ID")
    timestamp: datetime = Field(..., alias="Timestamp", description="발행 시각 (UTC)")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("timestamp")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        # naive 값은 UTC로 간주
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @classmethod
    def create(cls, message_id: str) -> MessageEnvelope:
        """현재 UTC 시각으로 Envelope 생성."""
        return cls(id=message_id, timestamp=datetime.now(timezone.utc))

    @classmethod
    def from_json(cls, raw: str | bytes) -> MessageEnvelope:
        """JSON 문자열에서 Envelope 복원.

        Raises:
            MalformedMessageError: JSON이 아니거나 필드가 누락/오타입인 경우
        """
        try:
            return cls.model_validate_json(raw)
        except PydanticValidationError as e:
            raise MalformedMessageError(f"Invalid message body: {e}") from e

    def to_json(self) -> str:
        """wire 포맷 JSON 문자열."""
        return self.model_dump_json(by_alias=True)
