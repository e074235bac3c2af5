"""Tests for config."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from apps._shared.messaging import ConfigurationError
from apps.sqs_worker.setup.config import Settings, get_settings


class TestSettings:
    """Settings tests."""

    def test_default_values(self) -> None:
        """Should have correct default values."""
        settings = Settings(queue_url="https://sqs.local/queue")

        assert settings.max_number_of_messages == 10
        assert settings.wait_time_seconds == 20
        assert settings.error_backoff_seconds == 5.0
        assert settings.processing_delay_seconds == 0.1
        assert settings.metrics_port == 0
        assert settings.log_level == "INFO"
        assert settings.service_name == "sqs-worker"


class TestGetSettings:
    """get_settings tests."""

    def test_loads_from_environment(self) -> None:
        """환경 변수에서 로드."""
        env_vars = {
            "SQS_QUEUE_URL": "https://sqs.local/queue",
            "AWS_DEFAULT_REGION": "ap-northeast-2",
            "SQS_MAX_NUMBER_OF_MESSAGES": "5",
            "SQS_WAIT_TIME_SECONDS": "10",
            "WORKER_ERROR_BACKOFF_SECONDS": "1.5",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            settings = get_settings()

        assert settings.queue_url == "https://sqs.local/queue"
        assert settings.aws_region == "ap-northeast-2"
        assert settings.endpoint_url is None
        assert settings.max_number_of_messages == 5
        assert settings.wait_time_seconds == 10
        assert settings.error_backoff_seconds == 1.5

    @pytest.mark.parametrize("queue_url", [None, "", "   "])
    def test_missing_queue_url(self, queue_url: str | None) -> None:
        """Queue URL 없으면 ConfigurationError."""
        env_vars = {} if queue_url is None else {"SQS_QUEUE_URL": queue_url}
        with patch.dict(os.environ, env_vars, clear=True):
            with pytest.raises(ConfigurationError, match="SQS Queue URL is not configured"):
                get_settings()

    def test_invalid_number(self) -> None:
        """숫자 형식 오류는 ConfigurationError."""
        env_vars = {
            "SQS_QUEUE_URL": "https://sqs.local/queue",
            "SQS_WAIT_TIME_SECONDS": "twenty",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            with pytest.raises(ConfigurationError, match="SQS_WAIT_TIME_SECONDS"):
                get_settings()
