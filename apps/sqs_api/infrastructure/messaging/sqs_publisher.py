"""SQS Message Publisher.

MessagePublisher 포트의 SQS 구현체입니다.
"""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, Any

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from apps._shared.messaging import BrokerUnavailableError, ConfigurationError

if TYPE_CHECKING:
    from apps._shared.messaging import MessageEnvelope

logger = logging.getLogger(__name__)


class SqsMessagePublisher:
    """SQS 기반 메시지 발행자.

    aioboto3 클라이언트 하나를 프로세스 수명 동안 공유합니다.
    클라이언트는 동시 요청에서 안전하게 사용할 수 있습니다.
    """

    def __init__(
        self,
        queue_url: str | None,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        session: aioboto3.Session | None = None,
    ) -> None:
        """Initialize.

        Args:
            queue_url: 발행 대상 Queue URL
            region_name: AWS 리전 (None이면 SDK 기본 체인)
            endpoint_url: 커스텀 엔드포인트 (LocalStack 등)
            session: aioboto3 세션 (테스트 주입용)
        """
        self._queue_url = queue_url
        self._region_name = region_name
        self._endpoint_url = endpoint_url
        self._session = session or aioboto3.Session()
        self._exit_stack: AsyncExitStack | None = None
        self._client: Any = None

    def _require_queue_url(self) -> str:
        if not self._queue_url or not self._queue_url.strip():
            raise ConfigurationError("SQS Queue URL is not configured")
        return self._queue_url

    async def connect(self) -> None:
        """SQS 클라이언트 생성.

        Raises:
            ConfigurationError: Queue URL 미설정
        """
        if self._client is not None:
            return

        queue_url = self._require_queue_url()

        stack = AsyncExitStack()
        self._client = await stack.enter_async_context(
            self._session.client(
                "sqs",
                region_name=self._region_name,
                endpoint_url=self._endpoint_url,
            )
        )
        self._exit_stack = stack
        logger.info("SQS publisher connected", extra={"queue_url": queue_url})

    async def close(self) -> None:
        """클라이언트 종료."""
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
            logger.debug("SQS publisher closed")
        self._exit_stack = None
        self._client = None

    async def publish(self, envelope: "MessageEnvelope") -> str:
        """SendMessage 호출.

        Args:
            envelope: 발행할 Envelope

        Returns:
            SQS MessageId

        Raises:
            ConfigurationError: Queue URL 미설정
            BrokerUnavailableError: SendMessage 실패
        """
        queue_url = self._require_queue_url()
        if self._client is None:
            await self.connect()

        logger.info("Sending message to SQS queue", extra={"queue_url": queue_url})
        try:
            response = await self._client.send_message(
                QueueUrl=queue_url,
                MessageBody=envelope.to_json(),
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "SendMessage failed",
                extra={"queue_url": queue_url, "error": str(e)},
            )
            raise BrokerUnavailableError(str(e)) from e

        return response["MessageId"]
