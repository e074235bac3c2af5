"""Messaging primitives shared by the SQS and Kafka apps."""

from apps._shared.messaging.envelope import MessageEnvelope
from apps._shared.messaging.errors import (
    BrokerError,
    BrokerUnavailableError,
    ConfigurationError,
    MalformedMessageError,
    MessagingError,
    ValidationError,
)

__all__ = [
    "BrokerError",
    "BrokerUnavailableError",
    "ConfigurationError",
    "MalformedMessageError",
    "MessageEnvelope",
    "MessagingError",
    "ValidationError",
]
