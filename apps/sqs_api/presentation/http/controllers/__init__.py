"""HTTP controllers (routers)."""

from apps.sqs_api.presentation.http.controllers.health import router as health_router
from apps.sqs_api.presentation.http.controllers.message import router as message_router

__all__ = ["health_router", "message_router"]
