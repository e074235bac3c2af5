"""Kafka Worker Entry Point.

토픽을 구독하여 레코드를 처리하고 배치 단위로 오프셋을 커밋하는 워커입니다.

Architecture:
    Kafka Topic
        │
        └── kafka-worker (이 모듈)
                │
                ├── ConsumeLoop ── KafkaConsumerClient (getmany/commit)
                │
                └── MessageHandler
                        │
                        └── ProcessMessageCommand

Run:
    python -m apps.kafka_worker.main
"""

from __future__ import annotations

import asyncio
import logging
import signal

from apps._shared.observability import start_metrics_server
from apps.kafka_worker.setup.config import get_settings
from apps.kafka_worker.setup.dependencies import Container
from apps.kafka_worker.setup.logging import setup_logging

logger = logging.getLogger(__name__)


class KafkaWorker:
    """Kafka Consumer Worker."""

    def __init__(self) -> None:
        self._container = Container()

    async def start(self) -> None:
        """워커 시작."""
        settings = get_settings()
        logger.info(
            "Kafka Worker starting",
            extra={
                "service_name": settings.service_name,
                "service_version": settings.service_version,
                "env": settings.environment,
                "topic": settings.topic,
                "group_id": settings.group_id,
                "commit_batch_size": settings.commit_batch_size,
            },
        )

        try:
            await self._container.init()
            logger.info("Dependencies initialized")

            if start_metrics_server(settings.metrics_port):
                logger.info("Metrics server started", extra={"port": settings.metrics_port})

            loop = asyncio.get_running_loop()
            for sig in (signal.SIGTERM, signal.SIGINT):
                loop.add_signal_handler(sig, self._handle_shutdown)

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
        logger.info("Kafka Worker stopped")


async def main() -> None:
    """Entry point."""
    setup_logging()
    worker = KafkaWorker()
    await worker.start()


if __name__ == "__main__":
    asyncio.run(main())
