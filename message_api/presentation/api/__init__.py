"""
API Routers - FastAPI endpoint definitions.
"""

from message_api.presentation.api.messages import router as messages_router
from message_api.presentation.api.metrics import router as metrics_router

__all__ = [
    "messages_router",
    "metrics_router",
]
