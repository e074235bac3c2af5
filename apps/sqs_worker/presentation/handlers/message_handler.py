"""Message Handler.

메시지 본문을 검증하고 Command를 호출하는 Presentation Layer 컴포넌트입니다.

Handler의 책임:
1. 본문 파싱 (MessageEnvelope)
2. Command 호출
3. CommandResult 반환

Handler가 하지 않는 것:
- delete 여부 결정 (ConsumeLoop에서)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps._shared.messaging import MalformedMessageError, MessageEnvelope
from apps.sqs_worker.application.common.result import CommandResult

if TYPE_CHECKING:
    from apps.sqs_worker.application.commands import ProcessMessageCommand

logger = logging.getLogger(__name__)


class MessageHandler:
    """메시지 핸들러.

    본문 → Envelope → Command 파이프라인을 담당합니다.
    """

    def __init__(self, command: "ProcessMessageCommand") -> None:
        """Initialize.

        Args:
            command: 메시지 처리 Command (DI)
        """
        self._command = command

    async def handle(self, body: str) -> CommandResult:
        """메시지 처리.

        Args:
            body: 메시지 본문

        Returns:
            CommandResult: 처리 결과
        """
        try:
            envelope = MessageEnvelope.from_json(body)
        except MalformedMessageError as e:
            # 형식 오류 → 재시도 무의미
            logger.error("Failed to parse message body", extra={"error": e.message})
            return CommandResult.drop(e.message)

        try:
            await self._command.execute(envelope)
        except Exception as e:
            # 예상치 못한 오류 → 재전달 대상
            logger.exception(
                "Failed to process message",
                extra={"envelope_id": envelope.id},
            )
            return CommandResult.retryable(str(e))

        return CommandResult.success()
