"""Test fixtures for sqs_api."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.sqs_api.setup.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings 캐시 초기화."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_publisher() -> AsyncMock:
    """Mock message publisher."""
    publisher = AsyncMock()
    publisher.connect = AsyncMock()
    publisher.close = AsyncMock()
    publisher.publish = AsyncMock(return_value="b6f1d1a4-0000-4000-8000-000000000042")
    return publisher


@pytest.fixture
def mock_sqs_client() -> AsyncMock:
    """Mock aioboto3 SQS client."""
    client = AsyncMock()
    client.send_message = AsyncMock(return_value={"MessageId": "sqs-message-1"})
    return client


@pytest.fixture
def mock_session(mock_sqs_client: AsyncMock) -> MagicMock:
    """Mock aioboto3 session (client()는 async context manager)."""
    session = MagicMock()
    session.client.return_value.__aenter__.return_value = mock_sqs_client
    return session
