"""Received Message DTO.

ReceiveMessage 응답에서 추출한 메시지 데이터 구조입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReceivedMessage:
    """SQS 수신 메시지 DTO.

    Attributes:
        message_id: SQS MessageId
        receipt_handle: 삭제(ack)용 토큰, 한 번만 사용
        body: 메시지 본문 (Envelope JSON)
    """

    message_id: str
    receipt_handle: str
    body: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReceivedMessage:
        """ReceiveMessage 응답 항목에서 생성."""
        return cls(
            message_id=data["MessageId"],
            receipt_handle=data["ReceiptHandle"],
            body=data.get("Body", ""),
        )
