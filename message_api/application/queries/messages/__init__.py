"""Message queries."""

from message_api.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)
from message_api.application.queries.messages.get_message import (
    GetMessageQuery,
    GetMessageHandler,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
    "GetMessageQuery",
    "GetMessageHandler",
]
