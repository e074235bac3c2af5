"""Process Message Command.

파싱된 Envelope에 대해 비즈니스 로직을 수행하는 Use Case입니다.
"""

from __future__ import annotations

import asyncio
import logging

from apps._shared.messaging import MessageEnvelope

logger = logging.getLogger(__name__)


class ProcessMessageCommand:
    """메시지 처리 Command.

    현재는 처리 시간을 흉내 내고 로그만 남깁니다.
    저장/외부 API 호출 등 실제 로직은 여기에 추가합니다.
    """

    def __init__(self, processing_delay: float = 0.1) -> None:
        """Initialize.

        Args:
            processing_delay: 처리 시간 시뮬레이션 (초)
        """
        self._processing_delay = processing_delay

    async def execute(self, envelope: MessageEnvelope) -> None:
        """메시지 처리.

        Args:
            envelope: 파싱된 메시지 Envelope
        """
        logger.info(
            "Parsed Message",
            extra={"envelope_id": envelope.id, "published_at": envelope.timestamp.isoformat()},
        )

        if self._processing_delay > 0:
            await asyncio.sleep(self._processing_delay)

        logger.info("Business logic processed", extra={"envelope_id": envelope.id})
