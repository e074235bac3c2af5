"""Test fixtures for sqs_worker."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.sqs_worker.application.common.dto import ReceivedMessage
from apps.sqs_worker.application.common.result import CommandResult
from apps.sqs_worker.setup.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings 캐시 초기화."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_envelope_data() -> dict[str, Any]:
    """Sample envelope wire data."""
    return {"Id": "order-42", "Timestamp": "2024-01-01T00:00:00Z"}


@pytest.fixture
def sample_body(sample_envelope_data: dict[str, Any]) -> str:
    """Sample message body."""
    return json.dumps(sample_envelope_data)


VALID_BODY = '{"Id":"x","Timestamp":"2024-01-01T00:00:00Z"}'


@pytest.fixture
def make_message():
    """ReceivedMessage 생성 팩토리."""

    def _make(index: int, body: str = VALID_BODY) -> ReceivedMessage:
        return ReceivedMessage(
            message_id=f"msg-{index}",
            receipt_handle=f"receipt-{index}",
            body=body,
        )

    return _make


@pytest.fixture
def mock_queue() -> AsyncMock:
    """Mock message queue."""
    queue = AsyncMock()
    queue.connect = AsyncMock()
    queue.close = AsyncMock()
    queue.receive = AsyncMock(return_value=[])
    queue.delete = AsyncMock()
    return queue


@pytest.fixture
def mock_handler() -> AsyncMock:
    """Mock message handler."""
    handler = AsyncMock()
    handler.handle = AsyncMock(return_value=CommandResult.success())
    return handler


@pytest.fixture
def mock_sqs_client() -> AsyncMock:
    """Mock aioboto3 SQS client."""
    client = AsyncMock()
    client.receive_message = AsyncMock(return_value={})
    client.delete_message = AsyncMock(return_value={})
    return client


@pytest.fixture
def mock_session(mock_sqs_client: AsyncMock) -> MagicMock:
    """Mock aioboto3 session (client()는 async context manager)."""
    session = MagicMock()
    session.client.return_value.__aenter__.return_value = mock_sqs_client
    return session
