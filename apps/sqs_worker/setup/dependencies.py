"""Dependency Injection.

Clean Architecture의 Composition Root입니다.
모든 의존성을 여기서 조립합니다.
"""

from __future__ import annotations

from apps.sqs_worker.application.commands import ProcessMessageCommand
from apps.sqs_worker.infrastructure.messaging import SqsQueueClient
from apps.sqs_worker.presentation.consume_loop import ConsumeLoop
from apps.sqs_worker.presentation.handlers import MessageHandler
from apps.sqs_worker.setup.config import get_settings


class Container:
    """의존성 컨테이너.

    모든 의존성을 생성하고 관리합니다.
    Clean Architecture 계층 순서대로 조립합니다.
    """

    def __init__(self) -> None:
        self._settings = get_settings()

        # Infrastructure
        self._queue: SqsQueueClient | None = None

        # Application
        self._process_command: ProcessMessageCommand | None = None

        # Presentation
        self._handler: MessageHandler | None = None
        self._consume_loop: ConsumeLoop | None = None

    async def init(self) -> None:
        """의존성 초기화."""
        # 1. Infrastructure 생성
        self._queue = SqsQueueClient(
            self._settings.queue_url,
            region_name=self._settings.aws_region,
            endpoint_url=self._settings.endpoint_url,
            max_number_of_messages=self._settings.max_number_of_messages,
            wait_time_seconds=self._settings.wait_time_seconds,
        )
        await self._queue.connect()

        # 2. Application 생성
        self._process_command = ProcessMessageCommand(
            processing_delay=self._settings.processing_delay_seconds,
        )

        # 3. Presentation 생성 (Application 주입)
        self._handler = MessageHandler(self._process_command)
        self._consume_loop = ConsumeLoop(
            self._queue,
            self._handler,
            error_backoff=self._settings.error_backoff_seconds,
        )

    async def close(self) -> None:
        """리소스 정리."""
        if self._queue:
            await self._queue.close()

    @property
    def consume_loop(self) -> ConsumeLoop:
        """Consume Loop."""
        if not self._consume_loop:
            raise RuntimeError("Container not initialized")
        return self._consume_loop
