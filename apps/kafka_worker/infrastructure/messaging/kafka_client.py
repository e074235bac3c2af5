"""Kafka Client.

토픽 구독/폴링/오프셋 커밋을 담당하는 Infrastructure 컴포넌트입니다.

| 컴포넌트 | 계층 | 책임 |
|---------|------|------|
| KafkaConsumerClient | Infrastructure | 구독, getmany, commit |
| ConsumeLoop | Presentation | dispatch, 오프셋 기록, 배치 커밋 결정 |
"""

from __future__ import annotations

import logging

from aiokafka import AIOKafkaConsumer, TopicPartition
from aiokafka.errors import KafkaError

from apps._shared.messaging import BrokerError
from apps.kafka_worker.application.common.dto import ConsumedRecord

logger = logging.getLogger(__name__)


class KafkaConsumerClient:
    """Kafka 컨슈머 클라이언트.

    자동 커밋을 끄고, ConsumeLoop가 요청할 때만 오프셋을 커밋합니다.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        topic: str,
        *,
        group_id: str = "kafka-message-consumer-group",
        auto_offset_reset: str = "earliest",
        poll_timeout_ms: int = 1000,
        max_poll_records: int = 100,
    ) -> None:
        """Initialize.

        Args:
            bootstrap_servers: 브로커 주소 (쉼표 구분)
            topic: 구독할 토픽
            group_id: 컨슈머 그룹 ID
            auto_offset_reset: 커밋된 오프셋이 없을 때 시작 위치
            poll_timeout_ms: getmany 대기 시간
            max_poll_records: 한 번에 가져올 최대 레코드 수
        """
        self._bootstrap_servers = bootstrap_servers
        self._topic = topic
        self._group_id = group_id
        self._auto_offset_reset = auto_offset_reset
        self._poll_timeout_ms = poll_timeout_ms
        self._max_poll_records = max_poll_records
        self._consumer: AIOKafkaConsumer | None = None

    @property
    def topic(self) -> str:
        """구독 중인 토픽."""
        return self._topic

    async def connect(self) -> None:
        """토픽 구독 후 컨슈머 시작.

        Raises:
            BrokerError: 브로커 연결 실패
        """
        if self._consumer is not None:
            return

        consumer = AIOKafkaConsumer(
            bootstrap_servers=self._bootstrap_servers,
            group_id=self._group_id,
            enable_auto_commit=False,
            auto_offset_reset=self._auto_offset_reset,
        )
        consumer.subscribe([self._topic])
        try:
            await consumer.start()
        except KafkaError as e:
            await consumer.stop()
            raise BrokerError(f"Kafka consumer start failed: {e}") from e

        self._consumer = consumer
        logger.info(
            "Kafka consumer initialized",
            extra={
                "bootstrap_servers": self._bootstrap_servers,
                "topic": self._topic,
                "group_id": self._group_id,
            },
        )

    async def close(self) -> None:
        """컨슈머 종료. 커밋하지 않은 오프셋은 버립니다."""
        if self._consumer is not None:
            await self._consumer.stop()
            logger.info("Kafka consumer closed")
        self._consumer = None

    def _require_consumer(self) -> AIOKafkaConsumer:
        if self._consumer is None:
            raise RuntimeError("Not connected. Call connect() first.")
        return self._consumer

    async def poll(self) -> list[ConsumedRecord]:
        """getmany로 레코드 배치 조회.

        Returns:
            파티션 순서를 유지한 레코드 목록 (없으면 빈 리스트)

        Raises:
            BrokerError: 조회 실패
        """
        consumer = self._require_consumer()
        try:
            batches = await consumer.getmany(
                timeout_ms=self._poll_timeout_ms,
                max_records=self._max_poll_records,
            )
        except KafkaError as e:
            raise BrokerError(f"Kafka poll failed: {e}") from e

        records: list[ConsumedRecord] = []
        for messages in batches.values():
            for message in messages:
                records.append(
                    ConsumedRecord(
                        topic=message.topic,
                        partition=message.partition,
                        offset=message.offset,
                        key=_decode(message.key),
                        value=_decode(message.value) or "",
                    )
                )
        return records

    def assignment(self) -> set[tuple[str, int]]:
        """현재 할당된 (topic, partition) 집합 (연결 전에는 빈 집합)."""
        if self._consumer is None:
            return set()
        return {(tp.topic, tp.partition) for tp in self._consumer.assignment()}

    async def commit(self, offsets: dict[tuple[str, int], int]) -> None:
        """오프셋 커밋.

        현재 할당되지 않은 파티션은 건너뜁니다 (리밸런스로 회수된 파티션).

        Args:
            offsets: {(topic, partition): 다음에 읽을 오프셋}

        Raises:
            BrokerError: 커밋 실패
        """
        consumer = self._require_consumer()
        assigned = self.assignment()
        to_commit = {
            TopicPartition(topic, partition): offset
            for (topic, partition), offset in offsets.items()
            if (topic, partition) in assigned
        }
        skipped = [f"{t}-{p}" for t, p in offsets if (t, p) not in assigned]
        if skipped:
            logger.warning(
                "Skipping commit for unassigned partitions",
                extra={"partitions": skipped},
            )
        if not to_commit:
            return

        try:
            await consumer.commit(to_commit)
        except KafkaError as e:
            raise BrokerError(f"Kafka commit failed: {e}") from e


def _decode(raw: bytes | None) -> str | None:
    if raw is None:
        return None
    # 잘못된 UTF-8 바이트는 U+FFFD로 치환
    return raw.decode("utf-8", errors="replace")
