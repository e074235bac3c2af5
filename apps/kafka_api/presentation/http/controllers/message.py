"""Message controller - Kafka 발행 엔드포인트."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from apps._shared.messaging import ValidationError
from apps.kafka_api.application.commands import SendMessageCommand
from apps.kafka_api.presentation.http.schemas import (
    ErrorResponse,
    MessageRequest,
    SendMessageResponse,
)
from apps.kafka_api.setup.dependencies import get_send_message_command

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["message"])


@router.post(
    "/message",
    response_model=SendMessageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def send_message(
    request: MessageRequest,
    command: SendMessageCommand = Depends(get_send_message_command),
) -> SendMessageResponse | JSONResponse:
    """ID를 Envelope로 감싸 Kafka 토픽에 발행합니다."""
    try:
        result = await command.execute(request.id)
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": e.message},
        )
    except Exception as e:
        logger.exception("Error sending message to Kafka")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to send message to Kafka", "details": str(e)},
        )

    return SendMessageResponse(message_id=result.message_id, sent_id=result.sent_id)
