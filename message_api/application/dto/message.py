"""Message DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from message_api.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: str
    organization_id: str
    title: str
    content: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            organization_id=message.organization_id.value,
            title=message.title,
            content=message.content,
            is_active=message.is_active,
            created_at=message.created_at,
            updated_at=message.updated_at,
        )
