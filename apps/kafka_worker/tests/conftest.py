"""Test fixtures for kafka_worker."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from aiokafka import TopicPartition

from apps.kafka_worker.application.common.dto import ConsumedRecord
from apps.kafka_worker.application.common.result import CommandResult
from apps.kafka_worker.setup.config import get_settings

VALID_VALUE = '{"Id":"order-42","Timestamp":"2024-01-01T00:00:00Z"}'


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings 캐시 초기화."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_record():
    """ConsumedRecord 생성 팩토리."""

    def _make(offset: int, value: str = VALID_VALUE, partition: int = 0) -> ConsumedRecord:
        return ConsumedRecord(
            topic="messages",
            partition=partition,
            offset=offset,
            key="order-42",
            value=value,
        )

    return _make


@pytest.fixture
def mock_stream() -> AsyncMock:
    """Mock record stream."""
    stream = AsyncMock()
    stream.connect = AsyncMock()
    stream.close = AsyncMock()
    stream.poll = AsyncMock(return_value=[])
    stream.commit = AsyncMock()
    stream.assignment = MagicMock(return_value={("messages", 0), ("messages", 1)})
    return stream


@pytest.fixture
def mock_handler() -> AsyncMock:
    """Mock message handler."""
    handler = AsyncMock()
    handler.handle = AsyncMock(return_value=CommandResult.success())
    return handler


@pytest.fixture
def mock_consumer() -> MagicMock:
    """Mock AIOKafkaConsumer 인스턴스."""
    consumer = MagicMock()
    consumer.start = AsyncMock()
    consumer.stop = AsyncMock()
    consumer.getmany = AsyncMock(return_value={})
    consumer.commit = AsyncMock()
    consumer.assignment = MagicMock(
        return_value={TopicPartition("messages", 0), TopicPartition("messages", 1)}
    )
    return consumer


@pytest.fixture
def consumer_cls(mock_consumer: MagicMock):
    """AIOKafkaConsumer 클래스 패치."""
    with patch(
        "apps.kafka_worker.infrastructure.messaging.kafka_client.AIOKafkaConsumer",
        return_value=mock_consumer,
    ) as cls:
        yield cls
