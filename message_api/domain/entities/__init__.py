"""
ENTITIES - Business objects with identity

Pure Python dataclasses (no ORM, no Pydantic).
"""

from message_api.domain.entities.message import Message

__all__ = [
    "Message",
]
