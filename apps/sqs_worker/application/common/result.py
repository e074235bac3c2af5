"""Command Result.

Handler의 처리 결과를 SQS delete 여부로 매핑합니다.

| status | delete | 의미 |
|--------|--------|------|
| SUCCESS | O | 처리 완료 |
| DROP | O | 형식 오류, 재전달해도 실패 |
| RETRYABLE | X | visibility timeout 후 재전달 |
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResultStatus(str, Enum):
    """메시지 처리 결과 상태 (metrics outcome 라벨과 동일한 어휘)."""

    SUCCESS = "success"
    RETRYABLE = "retryable"
    DROP = "drop"


@dataclass(frozen=True)
class CommandResult:
    """메시지 처리 결과.

    Attributes:
        status: 처리 결과 상태
        message: 실패 사유 (로그용)
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
    def should_delete(self) -> bool:
        """큐에서 삭제할지 여부."""
        return not self.is_retryable

    @classmethod
    def success(cls) -> CommandResult:
        return cls(ResultStatus.SUCCESS)

    @classmethod
    def retryable(cls, reason: str) -> CommandResult:
        return cls(ResultStatus.RETRYABLE, reason)

    @classmethod
    def drop(cls, reason: str) -> CommandResult:
        return cls(ResultStatus.DROP, reason)
