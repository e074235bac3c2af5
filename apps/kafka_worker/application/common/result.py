"""Command Result.

Handler의 판단을 파티션 오프셋 진행 여부로 옮깁니다.
값은 messages_consumed_total의 outcome 라벨과 같습니다.

| status | 오프셋 | 다음 poll |
|--------|--------|-----------|
| SUCCESS | next_offset 기록 | 다음 레코드 |
| DROP | next_offset 기록 | 다음 레코드 (건너뜀) |
| RETRYABLE | 그대로 | backoff 후 같은 레코드 |
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResultStatus(str, Enum):
    SUCCESS = "processed"
    DROP = "dropped"
    RETRYABLE = "retried"


@dataclass(frozen=True)
class CommandResult:
    """레코드 한 건의 처리 결과.

    Attributes:
        status: 처리 결과 상태
        message: DROP/RETRYABLE 사유 (로그 reason 필드)
    """

    status: ResultStatus
    message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        return self.status is ResultStatus.RETRYABLE

    @property
    def should_drop(self) -> bool:
        return self.status is ResultStatus.DROP

    @property
    def advances_offset(self) -> bool:
        """파티션 위치를 이 레코드 다음으로 옮길지 여부.

        False이면 커밋 대기 오프셋을 갱신하지 않아
        재시작/재할당 후에도 이 레코드부터 다시 읽습니다.
        """
        return not self.is_retryable

    @classmethod
    def success(cls) -> CommandResult:
        return cls(ResultStatus.SUCCESS)

    @classmethod
    def drop(cls, reason: str) -> CommandResult:
        return cls(ResultStatus.DROP, reason)

    @classmethod
    def retryable(cls, reason: str) -> CommandResult:
        return cls(ResultStatus.RETRYABLE, reason)
