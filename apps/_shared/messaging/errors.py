"""Messaging Errors.

API/Worker 전 구간에서 공유하는 예외 계층입니다.

    MessagingError
        ├── ConfigurationError     필수 설정 누락 (기동 시 fatal)
        ├── ValidationError        요청 ID 공백 (HTTP 400)
        ├── MalformedMessageError  소비한 payload 파싱 실패 (메시지 버림)
        └── BrokerError
                └── BrokerUnavailableError  발행 실패 (HTTP 500)
"""

from __future__ import annotations


class MessagingError(Exception):
    """메시징 기본 예외."""

    def __init__(self, message: str = "Messaging error occurred") -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(MessagingError):
    """필수 설정이 없을 때 발생합니다."""


class ValidationError(MessagingError):
    """요청 값이 유효하지 않을 때 발생합니다."""

    def __init__(self, message: str = "ID is required") -> None:
        super().__init__(message)


class MalformedMessageError(MessagingError):
    """브로커에서 받은 payload를 Envelope로 해석할 수 없을 때 발생합니다."""


class BrokerError(MessagingError):
    """브로커 호출 실패."""


class BrokerUnavailableError(BrokerError):
    """발행 호출 실패 (네트워크, 인증, 브로커 거부)."""
