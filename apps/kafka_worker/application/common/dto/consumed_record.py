"""Consumed Record DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConsumedRecord:
    """토픽에서 읽은 레코드.

    Attributes:
        topic: 토픽 이름
        partition: 파티션 번호
        offset: 파티션 내 오프셋
        key: 레코드 key (없으면 None)
        value: UTF-8 디코딩된 레코드 값
    """

    topic: str
    partition: int
    offset: int
    key: str | None
    value: str

    @property
    def next_offset(self) -> int:
        """이 레코드를 처리한 뒤 커밋할 오프셋."""
        return self.offset + 1

    @property
    def position(self) -> str:
        """로그용 "topic-partition-offset"."""
        return f"{self.topic}-{self.partition}-{self.offset}"
