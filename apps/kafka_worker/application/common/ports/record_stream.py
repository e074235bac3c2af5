"""RecordStream Port.

토픽 구독/폴링/오프셋 커밋 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.kafka_worker.application.common.dto import ConsumedRecord


class RecordStream(Protocol):
    """레코드 스트림 인터페이스.

    구현체:
        - KafkaConsumerClient (infrastructure/messaging/)
    """

    async def poll(self) -> list["ConsumedRecord"]:
        """레코드 배치 조회 (없으면 빈 리스트).

        Raises:
            BrokerError: 조회 실패
        """
        ...

    async def commit(self, offsets: dict[tuple[str, int], int]) -> None:
        """오프셋 커밋.

        Args:
            offsets: {(topic, partition): 다음에 읽을 오프셋}

        Raises:
            BrokerError: 커밋 실패
        """
        ...

    def assignment(self) -> set[tuple[str, int]]:
        """현재 할당된 (topic, partition) 집합."""
        ...

    async def connect(self) -> None:
        """구독 시작."""
        ...

    async def close(self) -> None:
        """구독 종료 (커밋하지 않음)."""
        ...
