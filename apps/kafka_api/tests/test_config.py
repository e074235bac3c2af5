"""Tests for config."""

from __future__ import annotations

import os
from unittest.mock import patch

from apps.kafka_api.setup.config import Settings, get_settings


class TestSettings:
    """Settings tests."""

    def test_default_values(self) -> None:
        """Should have correct default values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.bootstrap_servers is None
        assert settings.topic is None
        assert settings.client_id == "kafka-message-producer"
        assert settings.log_format == "text"
        assert settings.service_name == "kafka-api"
        assert settings.environment == "local"

    def test_reads_environment(self) -> None:
        """Should read values from environment."""
        env_vars = {
            "KAFKA_BOOTSTRAP_SERVERS": "localhost:9092",
            "KAFKA_TOPIC": "messages",
            "KAFKA_CLIENT_ID": "producer-1",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings()

        assert settings.bootstrap_servers == "localhost:9092"
        assert settings.topic == "messages"
        assert settings.client_id == "producer-1"
        assert settings.log_format == "json"

    def test_get_settings_cached(self) -> None:
        """get_settings() should be cached."""
        assert get_settings() is get_settings()
