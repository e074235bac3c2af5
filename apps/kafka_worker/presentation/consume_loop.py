"""Consume Loop.

Kafka 폴링, 레코드 처리, 배치 오프셋 커밋을 담당하는 Presentation 컴포넌트입니다.

Architecture:
    KafkaConsumerClient (Infrastructure)
        │
        │ ConsumedRecord[] (getmany)
        ▼
    ConsumeLoop (Presentation)
        │
        │ record
        ▼
    MessageHandler (Presentation)
        │
        │ CommandResult
        ▼
    ConsumeLoop
        │
        ├── SUCCESS / DROP: 다음 오프셋 기록, 카운터 +1
        │       └── 카운터 == commit_batch_size → commit
        └── RETRYABLE: 기록하지 않음, backoff

Delivery:
    at-least-once. 마지막 커밋 이후 처리된 레코드(최대 commit_batch_size - 1개)는
    크래시/종료 후 재전달될 수 있습니다.
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
    from apps.kafka_worker.application.common.dto import ConsumedRecord
    from apps.kafka_worker.application.common.ports import RecordStream
    from apps.kafka_worker.presentation.handlers import MessageHandler

logger = logging.getLogger(__name__)

BROKER = "kafka"


class LoopState(str, Enum):
    """ConsumeLoop 상태."""

    IDLE = "idle"
    POLLING = "polling"
    PROCESSING = "processing"
    COMMITTING = "committing"
    DRAINING = "draining"
    STOPPED = "stopped"


class ConsumeLoop:
    """Kafka 소비 루프.

    레코드를 순서대로 Handler에 전달하고, 처리된 레코드가
    commit_batch_size에 도달할 때마다 오프셋을 커밋합니다.
    stop() 이후에는 남은 배치를 커밋하지 않고 종료합니다.
    """

    def __init__(
        self,
        stream: "RecordStream",
        handler: "MessageHandler",
        *,
        commit_batch_size: int = 10,
        error_backoff: float = 5.0,
    ) -> None:
        """Initialize.

        Args:
            stream: 레코드 스트림 포트
            handler: 레코드 핸들러
            commit_batch_size: 커밋 단위 (처리된 레코드 수)
            error_backoff: 오류 후 대기 시간 (초)
        """
        if commit_batch_size < 1:
            raise ValueError("commit_batch_size must be at least 1")

        self._stream = stream
        self._handler = handler
        self._commit_batch_size = commit_batch_size
        self._error_backoff = error_backoff
        self._stopping = asyncio.Event()
        self._state = LoopState.IDLE

        # 마지막 커밋 이후 기록된 오프셋
        self._pending_offsets: dict[tuple[str, int], int] = {}
        self._since_commit = 0

        self._processed_total = 0
        self._dropped_total = 0
        self._retried_total = 0
        self._commits_total = 0

    async def run(self) -> None:
        """메인 소비 루프 실행.

        브로커에 연결될 때까지 backoff 간격으로 재시도한 뒤 폴링을 시작합니다.
        """
        logger.info("Kafka consume loop started")
        await self._connect_until_ready()

        while not self._stopping.is_set():
            try:
                await self._poll_once()
            except Exception:
                logger.exception("Error occurred while consuming messages from Kafka")
                await self._backoff()

        self._state = LoopState.STOPPED
        if self._since_commit:
            logger.info(
                "Stopped with uncommitted offsets",
                extra={"uncommitted": self._since_commit},
            )
        logger.info("Kafka consume loop stopped", extra=self.stats)

    async def _connect_until_ready(self) -> None:
        """구독 시작. 실패는 로깅 후 backoff, stop() 시 포기."""
        while not self._stopping.is_set():
            try:
                await self._stream.connect()
                return
            except BrokerError:
                logger.exception("Failed to connect to Kafka, retrying")
                await self._backoff()

    async def _poll_once(self) -> int:
        """한 번 폴링하고 받은 레코드를 처리.

        Returns:
            처리한 레코드 수
        """
        self._state = LoopState.POLLING
        records = await self._poll_until_stopped()
        if records is None:
            return 0

        if not records:
            self._state = LoopState.IDLE
            return 0

        handled = 0
        for record in records:
            # 남은 레코드는 커밋되지 않았으므로 다음 소비자에게 재전달
            if self._stopping.is_set():
                break
            await self._process(record)
            handled += 1

        if not self._stopping.is_set():
            self._state = LoopState.IDLE
        return handled

    async def _poll_until_stopped(self) -> list["ConsumedRecord"] | None:
        """폴링. stop() 호출 시 즉시 포기하고 None 반환."""
        poll = asyncio.ensure_future(self._stream.poll())
        stop_waiter = asyncio.ensure_future(self._stopping.wait())
        try:
            done, _ = await asyncio.wait(
                {poll, stop_waiter},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            stop_waiter.cancel()
            if not poll.done():
                poll.cancel()
                # close() 전에 진행 중인 getmany 정리 완료
                with suppress(asyncio.CancelledError):
                    await poll

        if poll in done:
            return poll.result()
        return None

    async def _process(self, record: "ConsumedRecord") -> None:
        """레코드 하나 처리 후 오프셋 기록, 필요 시 커밋."""
        if not self._stopping.is_set():
            self._state = LoopState.PROCESSING
        logger.info(
            "Processing message",
            extra={
                "topic": record.topic,
                "partition": record.partition,
                "offset": record.offset,
            },
        )

        result = await self._handler.handle(record)

        if not result.advances_offset:
            self._retried_total += 1
            MESSAGES_CONSUMED_TOTAL.labels(broker=BROKER, outcome=result.status.value).inc()
            logger.warning(
                "Message processing failed, backing off",
                extra={"position": record.position, "reason": result.message},
            )
            await self._backoff()
            return

        if result.is_success:
            self._processed_total += 1
            MESSAGES_CONSUMED_TOTAL.labels(broker=BROKER, outcome=result.status.value).inc()
            logger.info(
                "Successfully processed message",
                extra={"partition": record.partition, "offset": record.offset},
            )
        else:
            self._dropped_total += 1
            MESSAGES_CONSUMED_TOTAL.labels(broker=BROKER, outcome=result.status.value).inc()
            logger.warning(
                "Malformed message skipped",
                extra={"position": record.position, "reason": result.message},
            )

        self._pending_offsets[(record.topic, record.partition)] = record.next_offset
        self._since_commit += 1

        if self._since_commit >= self._commit_batch_size:
            try:
                await self._commit()
            except BrokerError:
                # 카운터 유지 → 다음 레코드 처리 후 다시 커밋
                logger.exception(
                    "Failed to commit offsets",
                    extra={"uncommitted": self._since_commit},
                )
                self._discard_unassigned()

    def _discard_unassigned(self) -> None:
        """더 이상 할당되지 않은 파티션의 기록 오프셋 제거.

        리밸런스로 회수된 파티션이 남아 있으면 이후 모든 커밋이 실패합니다.
        해당 레코드는 새 소유자가 마지막 커밋부터 다시 읽습니다.
        """
        assigned = self._stream.assignment()
        revoked = [tp for tp in self._pending_offsets if tp not in assigned]
        for tp in revoked:
            del self._pending_offsets[tp]
        if revoked:
            logger.warning(
                "Dropped offsets of revoked partitions",
                extra={"partitions": [f"{t}-{p}" for t, p in revoked]},
            )

    async def _commit(self) -> None:
        """기록된 오프셋 커밋 후 카운터 초기화.

        Raises:
            BrokerError: 커밋 실패
        """
        if not self._stopping.is_set():
            self._state = LoopState.COMMITTING
        offsets = dict(self._pending_offsets)
        await self._stream.commit(offsets)

        count = self._since_commit
        self._pending_offsets.clear()
        self._since_commit = 0
        self._commits_total += 1
        logger.debug("Committed offsets", extra={"count": count, "offsets": str(offsets)})

    async def _backoff(self) -> None:
        """고정 시간 대기. stop() 호출 시 즉시 깨어남."""
        with suppress(asyncio.TimeoutError):
            await asyncio.wait_for(self._stopping.wait(), timeout=self._error_backoff)

    def stop(self) -> None:
        """루프 종료 요청."""
        if self._stopping.is_set():
            return
        logger.info("Kafka consume loop stopping")
        self._state = LoopState.DRAINING
        self._stopping.set()

    @property
    def state(self) -> LoopState:
        """현재 상태."""
        return self._state

    @property
    def pending(self) -> int:
        """마지막 커밋 이후 처리된 레코드 수."""
        return self._since_commit

    @property
    def stats(self) -> dict[str, int]:
        """통계 반환."""
        return {
            "processed": self._processed_total,
            "dropped": self._dropped_total,
            "retried": self._retried_total,
            "commits": self._commits_total,
        }
