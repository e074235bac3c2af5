"""HTTP schemas."""

from apps.kafka_api.presentation.http.schemas.message import (
    ErrorResponse,
    MessageRequest,
    SendMessageResponse,
)

__all__ = ["ErrorResponse", "MessageRequest", "SendMessageResponse"]
