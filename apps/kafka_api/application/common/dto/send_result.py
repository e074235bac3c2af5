"""Send Result DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SendResult:
    """메시지 발행 결과.

    Attributes:
        message_id: 브로커 레코드 위치 (topic-partition-offset)
        sent_id: 클라이언트가 보낸 ID
    """

    message_id: str
    sent_id: str
