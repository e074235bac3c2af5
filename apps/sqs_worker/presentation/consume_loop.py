"""Consume Loop.

SQS 폴링 및 메시지 처리/삭제를 담당하는 Presentation 컴포넌트입니다.

Architecture:
    SqsQueueClient (Infrastructure)
        │
        │ ReceivedMessage[] (long polling)
        ▼
    ConsumeLoop (Presentation)
        │
        │ body
        ▼
    MessageHandler (Presentation)
        │
        │ CommandResult
        ▼
    ConsumeLoop
        │
        └── SUCCESS / DROP: delete
            RETRYABLE: 보존 (visibility timeout 후 재전달)

State:
    IDLE → POLLING → PROCESSING → ACKNOWLEDGING → IDLE
    stop() → DRAINING → STOPPED
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from enum import Enum
from typing import TYPE_CHECKING

from apps._shared.messaging import BrokerError
from apps._shared.observability import MESSAGES_CONSUMED_TOTAL

if TYPE_CHECKING:
    from apps.sqs_worker.application.common.dto import ReceivedMessage
    from apps.sqs_worker.application.common.ports import MessageQueue
    from apps.sqs_worker.presentation.handlers import MessageHandler

logger = logging.getLogger(__name__)

BROKER = "sqs"


class LoopState(str, Enum):
    """ConsumeLoop 상태."""

    IDLE = "idle"
    POLLING = "polling"
    PROCESSING = "processing"
    ACKNOWLEDGING = "acknowledging"
    DRAINING = "draining"
    STOPPED = "stopped"


class ConsumeLoop:
    """SQS 폴링 루프.

    메시지를 받아 Handler로 전달하고, 결과에 따라 삭제 여부를 결정합니다.
    폴링 실패는 로깅 후 고정 시간 대기하며 절대 루프를 종료시키지 않습니다.
    """

    def __init__(
        self,
        queue: "MessageQueue",
        handler: "MessageHandler",
        *,
        error_backoff: float = 5.0,
    ) -> None:
        """Initialize.

        Args:
            queue: 메시지 큐 포트
            handler: 메시지 핸들러
            error_backoff: 폴링 실패 후 대기 시간 (초)
        """
        self._queue = queue
        self._handler = handler
        self._error_backoff = error_backoff
        self._stopping = asyncio.Event()
        self._state = LoopState.IDLE
        self._processed_total = 0
        self._dropped_total = 0
        self._retried_total = 0

    async def run(self) -> None:
        """메인 폴링 루프 실행."""
        logger.info("SQS consume loop started")

        while not self._stopping.is_set():
            try:
                await self._poll_once()
            except Exception:
                logger.exception("Error occurred while polling messages from SQS")
                await self._backoff()

        self._state = LoopState.STOPPED
        logger.info("SQS consume loop stopped", extra=self.stats)

    async def _poll_once(self) -> int:
        """한 번 폴링하고 받은 메시지를 모두 처리.

        Returns:
            받은 메시지 수
        """
        self._state = LoopState.POLLING
        messages = await self._receive_until_stopped()
        if messages is None:
            return 0

        if not messages:
            logger.debug("No messages received from queue")
            self._state = LoopState.IDLE
            return 0

        logger.info("Received messages from SQS", extra={"count": len(messages)})

        # 이미 받은 배치는 stop 이후에도 끝까지 처리 (visibility timeout 낭비 방지)
        for message in messages:
            await self._process(message)

        if not self._stopping.is_set():
            self._state = LoopState.IDLE
        return len(messages)

    async def _receive_until_stopped(self) -> list["ReceivedMessage"] | None:
        """Long polling 수신. stop() 호출 시 즉시 포기하고 None 반환."""
        receive = asyncio.ensure_future(self._queue.receive())
        stop_waiter = asyncio.ensure_future(self._stopping.wait())
        try:
            done, _ = await asyncio.wait(
                {receive, stop_waiter},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            stop_waiter.cancel()
            if not receive.done():
                receive.cancel()
                # close() 전에 진행 중인 ReceiveMessage 정리 완료
                with suppress(asyncio.CancelledError):
                    await receive

        if receive in done:
            return receive.result()
        return None

    async def _process(self, message: "ReceivedMessage") -> None:
        """메시지 하나 처리 후 결과에 따라 삭제."""
        if not self._stopping.is_set():
            self._state = LoopState.PROCESSING
        logger.info("Processing message", extra={"message_id": message.message_id})

        result = await self._handler.handle(message.body)

        if not result.should_delete:
            self._retried_total += 1
            MESSAGES_CONSUMED_TOTAL.labels(broker=BROKER, outcome="retried").inc()
            logger.warning(
                "Message left in queue for redelivery",
                extra={"message_id": message.message_id, "reason": result.message},
            )
            return

        if not self._stopping.is_set():
            self._state = LoopState.ACKNOWLEDGING
        try:
            await self._queue.delete(message.receipt_handle)
        except BrokerError:
            # 삭제 실패 → visibility timeout 후 재전달
            logger.exception(
                "Failed to delete message",
                extra={"message_id": message.message_id},
            )
            return

        if result.is_success:
            self._processed_total += 1
            MESSAGES_CONSUMED_TOTAL.labels(broker=BROKER, outcome="processed").inc()
            logger.info(
                "Successfully processed and deleted message",
                extra={"message_id": message.message_id},
            )
        else:
            self._dropped_total += 1
            MESSAGES_CONSUMED_TOTAL.labels(broker=BROKER, outcome="dropped").inc()
            logger.warning(
                "Malformed message deleted",
                extra={"message_id": message.message_id, "reason": result.message},
            )

    async def _backoff(self) -> None:
        """고정 시간 대기. stop() 호출 시 즉시 깨어남."""
        with suppress(asyncio.TimeoutError):
            await asyncio.wait_for(self._stopping.wait(), timeout=self._error_backoff)

    def stop(self) -> None:
        """루프 종료 요청."""
        if self._stopping.is_set():
            return
        logger.info("SQS consume loop stopping")
        self._state = LoopState.DRAINING
        self._stopping.set()

    @property
    def state(self) -> LoopState:
        """현재 상태."""
        return self._state

    @property
    def stats(self) -> dict[str, int]:
        """통계 반환."""
        return {
            "processed": self._processed_total,
            "dropped": self._dropped_total,
            "retried": self._retried_total,
        }
