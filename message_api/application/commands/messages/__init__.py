"""Message commands."""

from .create_message import CreateMessageCommand, CreateMessageHandler
from .delete_message import DeleteMessageCommand, DeleteMessageHandler
from .update_message import UpdateMessageCommand, UpdateMessageHandler

__all__ = [
    "CreateMessageCommand",
    "CreateMessageHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
    "UpdateMessageCommand",
    "UpdateMessageHandler",
]
