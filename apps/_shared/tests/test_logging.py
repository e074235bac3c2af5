"""Tests for configure_logging."""

from __future__ import annotations

import logging

import ecs_logging
import pytest

from apps._shared.observability import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """루트 로거/record factory 복원."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    factory = logging.getLogRecordFactory()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.setLogRecordFactory(factory)


def _configure(**overrides) -> None:
    options = {
        "level": "debug",
        "log_format": "json",
        "service_name": "sqs-worker",
        "service_version": "1.2.3",
        "environment": "dev",
    }
    options.update(overrides)
    configure_logging(**options)


def test_json_format_uses_ecs_formatter() -> None:
    """json → ECS StdlibFormatter."""
    _configure()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ecs_logging.StdlibFormatter)


def test_text_format() -> None:
    """text → 일반 Formatter."""
    _configure(log_format="text")

    formatter = logging.getLogger().handlers[0].formatter
    assert not isinstance(formatter, ecs_logging.StdlibFormatter)


def test_unknown_level_falls_back_to_info() -> None:
    """알 수 없는 레벨은 INFO."""
    _configure(level="chatty")

    assert logging.getLogger().level == logging.INFO


def test_records_carry_service_metadata() -> None:
    """모든 레코드에 service 메타데이터 추가, 재설정 시 마지막 값 사용."""
    _configure(service_name="first")
    _configure(service_name="kafka-worker")

    record = logging.getLogRecordFactory()("x", logging.INFO, __file__, 1, "msg", (), None)

    assert record.service == {
        "name": "kafka-worker",
        "version": "1.2.3",
        "environment": "dev",
    }


def test_quiet_loggers() -> None:
    """지정한 라이브러리 로거는 WARNING."""
    _configure(quiet_loggers=("aiokafka",))

    assert logging.getLogger("aiokafka").level == logging.WARNING
