"""SQS Client.

큐 연결/수신/삭제를 담당하는 Infrastructure 컴포넌트입니다.

| 컴포넌트 | 계층 | 책임 |
|---------|------|------|
| SqsQueueClient | Infrastructure | SQS 연결, ReceiveMessage, DeleteMessage |
| ConsumeLoop | Presentation | poll/dispatch/delete 결정 |
"""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from typing import Any

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from apps._shared.messaging import BrokerError
from apps.sqs_worker.application.common.dto import ReceivedMessage

logger = logging.getLogger(__name__)


class SqsQueueClient:
    """SQS 큐 클라이언트.

    Long polling으로 메시지를 받고, 처리된 메시지를 receipt handle로 삭제합니다.
    """

    def __init__(
        self,
        queue_url: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        max_number_of_messages: int = 10,
        wait_time_seconds: int = 20,
        session: aioboto3.Session | None = None,
    ) -> None:
        """Initialize.

        Args:
            queue_url: 소비할 Queue URL
            region_name: AWS 리전 (None이면 SDK 기본 체인)
            endpoint_url: 커스텀 엔드포인트 (LocalStack 등)
            max_number_of_messages: 한 번에 받을 최대 메시지 수 (1~10)
            wait_time_seconds: Long polling 대기 시간 (0~20)
            session: aioboto3 세션 (테스트 주입용)
        """
        self._queue_url = queue_url
        self._region_name = region_name
        self._endpoint_url = endpoint_url
        self._max_number_of_messages = max_number_of_messages
        self._wait_time_seconds = wait_time_seconds
        self._session = session or aioboto3.Session()
        self._exit_stack: AsyncExitStack | None = None
        self._client: Any = None

    @property
    def queue_url(self) -> str:
        """소비 중인 Queue URL."""
        return self._queue_url

    async def connect(self) -> None:
        """SQS 클라이언트 생성."""
        if self._client is not None:
            return

        stack = AsyncExitStack()
        self._client = await stack.enter_async_context(
            self._session.client(
                "sqs",
                region_name=self._region_name,
                endpoint_url=self._endpoint_url,
            )
        )
        self._exit_stack = stack
        logger.info(
            "SQS consumer initialized",
            extra={
                "queue_url": self._queue_url,
                "max_number_of_messages": self._max_number_of_messages,
                "wait_time_seconds": self._wait_time_seconds,
            },
        )

    async def close(self) -> None:
        """클라이언트 종료."""
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
            logger.info("SQS client closed")
        self._exit_stack = None
        self._client = None

    def _require_client(self) -> Any:
        if self._client is None:
            raise RuntimeError("Not connected. Call connect() first.")
        return self._client

    async def receive(self) -> list[ReceivedMessage]:
        """ReceiveMessage (long polling).

        Returns:
            수신 메시지 목록 (없으면 빈 리스트)

        Raises:
            BrokerError: ReceiveMessage 실패
        """
        client = self._require_client()
        logger.debug("Polling for messages", extra={"queue_url": self._queue_url})
        try:
            response = await client.receive_message(
                QueueUrl=self._queue_url,
                MaxNumberOfMessages=self._max_number_of_messages,
                WaitTimeSeconds=self._wait_time_seconds,
                AttributeNames=["All"],
                MessageAttributeNames=["All"],
            )
        except (ClientError, BotoCoreError) as e:
            raise BrokerError(f"ReceiveMessage failed: {e}") from e

        return [ReceivedMessage.from_dict(item) for item in response.get("Messages", [])]

    async def delete(self, receipt_handle: str) -> None:
        """DeleteMessage.

        Args:
            receipt_handle: 수신 시 받은 receipt handle

        Raises:
            BrokerError: DeleteMessage 실패
        """
        client = self._require_client()
        try:
            await client.delete_message(
                QueueUrl=self._queue_url,
                ReceiptHandle=receipt_handle,
            )
        except (ClientError, BotoCoreError) as e:
            raise BrokerError(f"DeleteMessage failed: {e}") from e
