"""Message Handler.

레코드 값을 Envelope로 파싱하고 Command를 호출하는 Presentation Layer 컴포넌트입니다.
오프셋 기록/커밋은 ConsumeLoop 책임입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps._shared.messaging import MalformedMessageError, MessageEnvelope
from apps.kafka_worker.application.common.result import CommandResult

if TYPE_CHECKING:
    from apps.kafka_worker.application.commands import ProcessMessageCommand
    from apps.kafka_worker.application.common.dto import ConsumedRecord

logger = logging.getLogger(__name__)


class MessageHandler:
    """레코드 핸들러."""

    def __init__(self, command: "ProcessMessageCommand") -> None:
        self._command = command

    async def handle(self, record: "ConsumedRecord") -> CommandResult:
        """레코드 처리.

        Args:
            record: 토픽에서 읽은 레코드

        Returns:
            CommandResult: SUCCESS, DROP(형식 오류), RETRYABLE(처리 실패)
        """
        logger.debug("Message body", extra={"position": record.position, "body": record.value})

        try:
            envelope = MessageEnvelope.from_json(record.value)
        except MalformedMessageError as e:
            logger.error(
                "Failed to parse message body",
                extra={"position": record.position, "error": e.message},
            )
            return CommandResult.drop(e.message)

        try:
            await self._command.execute(envelope)
        except Exception as e:
            logger.exception(
                "Failed to process message",
                extra={"position": record.position, "envelope_id": envelope.id},
            )
            return CommandResult.retryable(str(e))

        return CommandResult.success()
