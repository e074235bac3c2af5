"""MessageQueue Port.

큐에서 메시지를 받고 삭제하는 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.sqs_worker.application.common.dto import ReceivedMessage


class MessageQueue(Protocol):
    """메시지 큐 인터페이스.

    구현체:
        - SqsQueueClient (infrastructure/messaging/)
    """

    async def receive(self) -> list["ReceivedMessage"]:
        """메시지 수신 (long polling).

        Returns:
            수신 메시지 목록
        """
        ...

    async def delete(self, receipt_handle: str) -> None:
        """처리 완료 메시지 삭제.

        Args:
            receipt_handle: 수신 시 받은 receipt handle
        """
        ...

    async def connect(self) -> None:
        """연결 수립."""
        ...

    async def close(self) -> None:
        """연결 종료."""
        ...
