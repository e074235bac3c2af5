"""Tests for MessageHandler."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from apps.sqs_worker.application.common.result import ResultStatus
from apps.sqs_worker.presentation.handlers import MessageHandler


class TestMessageHandler:
    """MessageHandler tests."""

    @pytest.fixture
    def mock_command(self) -> AsyncMock:
        """Mock process command."""
        command = AsyncMock()
        command.execute = AsyncMock(return_value=None)
        return command

    @pytest.mark.asyncio
    async def test_handle_success(self, mock_command: AsyncMock, sample_body: str) -> None:
        """정상 메시지는 SUCCESS."""
        handler = MessageHandler(mock_command)

        result = await handler.handle(sample_body)

        assert result.status == ResultStatus.SUCCESS
        envelope = mock_command.execute.call_args[0][0]
        assert envelope.id == "order-42"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["not json", "", '{"Id": "only-id"}', "[]"])
    async def test_handle_malformed_drops(self, mock_command: AsyncMock, body: str) -> None:
        """형식 오류 메시지는 DROP, Command 미호출."""
        handler = MessageHandler(mock_command)

        result = await handler.handle(body)

        assert result.status == ResultStatus.DROP
        mock_command.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_handle_processing_error_retryable(
        self,
        mock_command: AsyncMock,
        sample_body: str,
    ) -> None:
        """처리 중 예외는 RETRYABLE."""
        mock_command.execute.side_effect = RuntimeError("downstream unavailable")
        handler = MessageHandler(mock_command)

        result = await handler.handle(sample_body)

        assert result.status == ResultStatus.RETRYABLE
        assert result.message == "downstream unavailable"
