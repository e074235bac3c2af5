"""Logging configuration shared by the APIs and workers.

stdout 단일 핸들러 + 서비스 메타데이터(service.name/version/environment).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import Any

import ecs_logging

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# import 시점의 factory. 재설정 시 메타데이터 factory가 중첩되지 않도록 보관
_BASE_RECORD_FACTORY = logging.getLogRecordFactory()


def configure_logging(
    *,
    level: str,
    log_format: str,
    service_name: str,
    service_version: str,
    environment: str,
    quiet_loggers: Iterable[str] = (),
) -> None:
    """루트 로거 설정.

    Args:
        level: 로그 레벨 이름 (대소문자 무관, 알 수 없으면 INFO)
        log_format: "json"이면 ECS JSON, 그 외에는 텍스트
        service_name: service.name
        service_version: service.version
        environment: service.environment
        quiet_loggers: WARNING으로 낮출 외부 라이브러리 로거
    """
    handler = logging.StreamHandler(sys.stdout)
    if log_format.lower() == "json":
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    service = {
        "name": service_name,
        "version": service_version,
        "environment": environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _BASE_RECORD_FACTORY(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
