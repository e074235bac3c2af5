"""Send Message Command.

요청 ID를 검증하고 Envelope로 감싸 SQS에 발행하는 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps._shared.messaging import (
    BrokerError,
    ConfigurationError,
    MessageEnvelope,
    ValidationError,
)
from apps._shared.observability import MESSAGES_PUBLISHED_TOTAL
from apps.sqs_api.application.common.dto import SendResult

if TYPE_CHECKING:
    from apps.sqs_api.application.common.ports import MessagePublisher

logger = logging.getLogger(__name__)

BROKER = "sqs"


class SendMessageCommand:
    """메시지 발행 Command.

    validate → serialize → publish. 재시도는 하지 않습니다.
    """

    def __init__(self, publisher: "MessagePublisher") -> None:
        """Initialize.

        Args:
            publisher: 메시지 발행자 (DI)
        """
        self._publisher = publisher

    async def execute(self, message_id: str | None) -> SendResult:
        """메시지 발행.

        Args:
            message_id: 클라이언트 메시지 ID

        Returns:
            SendResult: SQS MessageId와 요청 ID

        Raises:
            ValidationError: ID가 비어 있는 경우 (발행하지 않음)
            ConfigurationError: Queue URL 미설정
            BrokerUnavailableError: 발행 실패
        """
        if message_id is None or not message_id.strip():
            MESSAGES_PUBLISHED_TOTAL.labels(broker=BROKER, status="rejected").inc()
            raise ValidationError("ID is required")

        envelope = MessageEnvelope.create(message_id)

        try:
            broker_message_id = await self._publisher.publish(envelope)
        except ConfigurationError:
            MESSAGES_PUBLISHED_TOTAL.labels(broker=BROKER, status="misconfigured").inc()
            raise
        except BrokerError:
            MESSAGES_PUBLISHED_TOTAL.labels(broker=BROKER, status="failed").inc()
            raise

        MESSAGES_PUBLISHED_TOTAL.labels(broker=BROKER, status="success").inc()
        logger.info(
            "Message sent to SQS",
            extra={"message_id": broker_message_id, "sent_id": message_id},
        )
        return SendResult(message_id=broker_message_id, sent_id=message_id)
