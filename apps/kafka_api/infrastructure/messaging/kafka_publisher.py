"""Kafka Message Publisher.

MessagePublisher 포트의 Kafka 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aiokafka import AIOKafkaProducer
from aiokafka.errors import KafkaError

from apps._shared.messaging import BrokerUnavailableError, ConfigurationError

if TYPE_CHECKING:
    from apps._shared.messaging import MessageEnvelope

logger = logging.getLogger(__name__)


class KafkaMessagePublisher:
    """Kafka 기반 메시지 발행자.

    AIOKafkaProducer 하나를 프로세스 수명 동안 공유합니다.
    레코드 key는 메시지 ID이므로 같은 ID는 같은 파티션으로 갑니다.
    """

    def __init__(
        self,
        bootstrap_servers: str | None,
        topic: str | None,
        *,
        client_id: str = "kafka-message-producer",
    ) -> None:
        """Initialize.

        Args:
            bootstrap_servers: 브로커 주소 (쉼표 구분)
            topic: 발행 대상 토픽
            client_id: 프로듀서 client.id
        """
        self._bootstrap_servers = bootstrap_servers
        self._topic = topic
        self._client_id = client_id
        self._producer: AIOKafkaProducer | None = None

    def _require_bootstrap_servers(self) -> str:
        if not self._bootstrap_servers or not self._bootstrap_servers.strip():
            raise ConfigurationError("Kafka Bootstrap Servers are not configured")
        return self._bootstrap_servers

    def _require_topic(self) -> str:
        if not self._topic or not self._topic.strip():
            raise ConfigurationError("Kafka Topic is not configured")
        return self._topic

    async def connect(self) -> None:
        """프로듀서 시작.

        Raises:
            ConfigurationError: Bootstrap Servers 또는 Topic 미설정
            BrokerUnavailableError: 브로커 연결 실패
        """
        if self._producer is not None:
            return

        bootstrap_servers = self._require_bootstrap_servers()
        topic = self._require_topic()

        producer = AIOKafkaProducer(
            bootstrap_servers=bootstrap_servers,
            client_id=self._client_id,
        )
        try:
            await producer.start()
        except KafkaError as e:
            await producer.stop()
            raise BrokerUnavailableError(str(e)) from e

        self._producer = producer
        logger.info(
            "Kafka producer connected",
            extra={"bootstrap_servers": bootstrap_servers, "topic": topic},
        )

    async def close(self) -> None:
        """프로듀서 종료 (대기 중인 전송 flush)."""
        if self._producer is not None:
            await self._producer.stop()
            logger.debug("Kafka producer closed")
        self._producer = None

    async def publish(self, envelope: "MessageEnvelope") -> str:
        """레코드 발행 후 브로커 ack 대기.

        Args:
            envelope: 발행할 Envelope

        Returns:
            "<topic>-<partition>-<offset>"

        Raises:
            ConfigurationError: Topic 미설정
            BrokerUnavailableError: 발행 실패
        """
        topic = self._require_topic()
        if self._producer is None:
            await self.connect()

        logger.info("Sending message to Kafka topic", extra={"topic": topic})
        try:
            metadata = await self._producer.send_and_wait(
                topic,
                key=envelope.id.encode("utf-8"),
                value=envelope.to_json().encode("utf-8"),
            )
        except KafkaError as e:
            logger.error(
                "Produce failed",
                extra={"topic": topic, "error": str(e)},
            )
            raise BrokerUnavailableError(str(e)) from e

        return f"{metadata.topic}-{metadata.partition}-{metadata.offset}"
