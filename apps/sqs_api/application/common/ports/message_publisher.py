"""MessagePublisher Port.

Envelope를 브로커로 발행하는 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps._shared.messaging import MessageEnvelope


class MessagePublisher(Protocol):
    """메시지 발행 인터페이스.

    구현체:
        - SqsMessagePublisher (infrastructure/messaging/)
    """

    async def publish(self, envelope: "MessageEnvelope") -> str:
        """Envelope 발행.

        Args:
            envelope: 발행할 메시지 Envelope

        Returns:
            브로커가 부여한 메시지 ID

        Raises:
            ConfigurationError: 발행 대상 미설정
            BrokerUnavailableError: 발행 실패
        """
        ...

    async def connect(self) -> None:
        """연결 수립."""
        ...

    async def close(self) -> None:
        """연결 종료."""
        ...
