"""Tests for SqsMessagePublisher."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from apps._shared.messaging import (
    BrokerUnavailableError,
    ConfigurationError,
    MessageEnvelope,
)
from apps.sqs_api.infrastructure.messaging import SqsMessagePublisher

QUEUE_URL = "https://sqs.ap-northeast-2.amazonaws.com/123456789012/messages"


class TestSqsMessagePublisher:
    """SqsMessagePublisher tests."""

    @pytest.fixture
    def publisher(self, mock_session: MagicMock) -> SqsMessagePublisher:
        """Create publisher with mocked session."""
        return SqsMessagePublisher(
            QUEUE_URL,
            region_name="ap-northeast-2",
            session=mock_session,
        )

    @pytest.mark.asyncio
    async def test_connect_creates_sqs_client(
        self,
        publisher: SqsMessagePublisher,
        mock_session: MagicMock,
    ) -> None:
        """connect() should open an SQS client."""
        await publisher.connect()

        mock_session.client.assert_called_once_with(
            "sqs",
            region_name="ap-northeast-2",
            endpoint_url=None,
        )

    @pytest.mark.asyncio
    async def test_connect_is_idempotent(
        self,
        publisher: SqsMessagePublisher,
        mock_session: MagicMock,
    ) -> None:
        """connect() twice should create one client."""
        await publisher.connect()
        await publisher.connect()

        assert mock_session.client.call_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("queue_url", [None, "", "  "])
    async def test_connect_requires_queue_url(
        self,
        mock_session: MagicMock,
        queue_url: str | None,
    ) -> None:
        """connect() without queue URL should raise ConfigurationError."""
        publisher = SqsMessagePublisher(queue_url, session=mock_session)

        with pytest.raises(ConfigurationError, match="SQS Queue URL is not configured"):
            await publisher.connect()

        mock_session.client.assert_not_called()

    @pytest.mark.asyncio
    async def test_publish_sends_envelope_json(
        self,
        publisher: SqsMessagePublisher,
        mock_sqs_client: AsyncMock,
    ) -> None:
        """publish() should send envelope JSON and return MessageId."""
        envelope = MessageEnvelope.create("order-42")

        message_id = await publisher.publish(envelope)

        assert message_id == "sqs-message-1"
        kwargs = mock_sqs_client.send_message.call_args.kwargs
        assert kwargs["QueueUrl"] == QUEUE_URL
        body = json.loads(kwargs["MessageBody"])
        assert body["Id"] == "order-42"
        assert "Timestamp" in body

    @pytest.mark.asyncio
    async def test_publish_without_queue_url_makes_no_call(
        self,
        mock_session: MagicMock,
        mock_sqs_client: AsyncMock,
    ) -> None:
        """publish() without queue URL should fail before calling SQS."""
        publisher = SqsMessagePublisher(None, session=mock_session)

        with pytest.raises(ConfigurationError):
            await publisher.publish(MessageEnvelope.create("order-42"))

        mock_sqs_client.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_publish_wraps_client_error(
        self,
        publisher: SqsMessagePublisher,
        mock_sqs_client: AsyncMock,
    ) -> None:
        """ClientError should become BrokerUnavailableError."""
        mock_sqs_client.send_message.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}},
            "SendMessage",
        )

        with pytest.raises(BrokerUnavailableError) as exc_info:
            await publisher.publish(MessageEnvelope.create("order-42"))

        assert "AccessDenied" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_publish_wraps_connection_error(
        self,
        publisher: SqsMessagePublisher,
        mock_sqs_client: AsyncMock,
    ) -> None:
        """Network errors should become BrokerUnavailableError."""
        mock_sqs_client.send_message.side_effect = EndpointConnectionError(
            endpoint_url="https://sqs.invalid"
        )

        with pytest.raises(BrokerUnavailableError):
            await publisher.publish(MessageEnvelope.create("order-42"))

    @pytest.mark.asyncio
    async def test_close_releases_client(
        self,
        publisher: SqsMessagePublisher,
        mock_session: MagicMock,
    ) -> None:
        """close() should exit the client context."""
        await publisher.connect()

        await publisher.close()

        mock_session.client.return_value.__aexit__.assert_awaited_once()
        assert publisher._client is None

    @pytest.mark.asyncio
    async def test_close_before_connect(self, publisher: SqsMessagePublisher) -> None:
        """close() should be safe before connect()."""
        await publisher.close()  # Should not raise
