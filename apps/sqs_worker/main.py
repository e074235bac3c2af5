"""SQS Worker Entry Point.

SQS 큐를 long polling으로 소비하여 메시지를 처리/삭제하는 워커입니다.

Architecture:
    SQS Queue
        │
        └── sqs-worker (이 모듈)
                │
                ├── ConsumeLoop ── SqsQueueClient (receive/delete)
                │
                └── MessageHandler
                        │
                        └── ProcessMessageCommand

Run:
    python -m apps.sqs_worker.main
"""

from __future__ import annotations

import asyncio
import logging
import signal

from apps._shared.observability import start_metrics_server
from apps.sqs_worker.setup.config import get_settings
from apps.sqs_worker.setup.dependencies import Container
from apps.sqs_worker.setup.logging import setup_logging

logger = logging.getLogger(__name__)


class SqsWorker:
    """SQS Consumer Worker.

    큐 메시지를 소비하고 처리 후 삭제합니다.
    """

    def __init__(self) -> None:
        self._container = Container()

    async def start(self) -> None:
        """워커 시작."""
        settings = get_settings()
        logger.info(
            "SQS Worker starting",
            extra={
                "service_name": settings.service_name,
                "service_version": settings.service_version,
                "env": settings.environment,
                "queue_url": settings.queue_url,
            },
        )

        try:
            # 의존성 초기화
            await self._container.init()
            logger.info("Dependencies initialized")

            if start_metrics_server(settings.metrics_port):
                logger.info("Metrics server started", extra={"port": settings.metrics_port})

            # 시그널 핸들러 등록
            loop = asyncio.get_running_loop()
            for sig in (signal.SIGTERM, signal.SIGINT):
                loop.add_signal_handler(sig, self._handle_shutdown)

            # 소비 루프 시작
            await self._container.consume_loop.run()
        finally:
            await self._cleanup()

    def _handle_shutdown(self) -> None:
        """Graceful shutdown 핸들러."""
        logger.info("Shutdown signal received")
        self._container.consume_loop.stop()

    async def _cleanup(self) -> None:
        """리소스 정리."""
        await self._container.close()
        logger.info("SQS Worker stopped")


async def main() -> None:
    """Entry point."""
    setup_logging()
    worker = SqsWorker()
    await worker.start()


if __name__ == "__main__":
    asyncio.run(main())
