"""Test fixtures for kafka_api."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from apps.kafka_api.setup.config import get_settings


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
    publisher.publish = AsyncMock(return_value="messages-0-42")
    return publisher


@pytest.fixture
def mock_producer() -> MagicMock:
    """Mock AIOKafkaProducer 인스턴스."""
    producer = MagicMock()
    producer.start = AsyncMock()
    producer.stop = AsyncMock()
    producer.send_and_wait = AsyncMock(
        return_value=MagicMock(topic="messages", partition=2, offset=17)
    )
    return producer


@pytest.fixture
def producer_cls(mock_producer: MagicMock):
    """AIOKafkaProducer 클래스 패치."""
    with patch(
        "apps.kafka_api.infrastructure.messaging.kafka_publisher.AIOKafkaProducer",
        return_value=mock_producer,
    ) as cls:
        yield cls
