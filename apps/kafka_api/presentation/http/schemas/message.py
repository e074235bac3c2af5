"""Message HTTP schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageRequest(BaseModel):
    """메시지 발행 요청 스키마.

    id 누락은 공백과 동일하게 400으로 처리합니다.
    """

    id: str | None = Field(None, description="클라이언트 메시지 ID", examples=["order-42"])


class SendMessageResponse(BaseModel):
    """메시지 발행 성공 응답 스키마."""

    success: bool = Field(True, description="성공 여부")
    message_id: str = Field(..., alias="messageId", description="topic-partition-offset")
    sent_id: str = Field(..., alias="sentId", description="요청한 ID")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """에러 응답 스키마."""

    error: str = Field(..., description="에러 메시지")
    details: str | list[Any] | None = Field(
        None, description="상세 원인 (본문 검증 실패 시 오류 목록)"
    )
