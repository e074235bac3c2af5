"""Dependency Injection.

Clean Architecture의 Composition Root입니다.
"""

from __future__ import annotations

from apps.kafka_worker.application.commands import ProcessMessageCommand
from apps.kafka_worker.infrastructure.messaging import KafkaConsumerClient
from apps.kafka_worker.presentation.consume_loop import ConsumeLoop
from apps.kafka_worker.presentation.handlers import MessageHandler
from apps.kafka_worker.setup.config import get_settings


class Container:
    """의존성 컨테이너.

    Infrastructure → Application → Presentation 순서로 조립합니다.
    """

    def __init__(self) -> None:
        self._settings = get_settings()
        self._stream: KafkaConsumerClient | None = None
        self._consume_loop: ConsumeLoop | None = None

    async def init(self) -> None:
        """의존성 초기화.

        브로커 연결은 ConsumeLoop.run()이 재시도하며 수행합니다.
        """
        settings = self._settings

        self._stream = KafkaConsumerClient(
            settings.bootstrap_servers,
            settings.topic,
            group_id=settings.group_id,
            auto_offset_reset=settings.auto_offset_reset,
            poll_timeout_ms=settings.poll_timeout_ms,
            max_poll_records=settings.max_poll_records,
        )

        command = ProcessMessageCommand(processing_delay=settings.processing_delay_seconds)
        handler = MessageHandler(command)
        self._consume_loop = ConsumeLoop(
            self._stream,
            handler,
            commit_batch_size=settings.commit_batch_size,
            error_backoff=settings.error_backoff_seconds,
        )

    async def close(self) -> None:
        """컨슈머 종료 (미커밋 오프셋은 커밋하지 않음)."""
        if self._stream:
            await self._stream.close()

    @property
    def consume_loop(self) -> ConsumeLoop:
        """Consume Loop."""
        if not self._consume_loop:
            raise RuntimeError("Container not initialized")
        return self._consume_loop
