"""
Message Entity - A titled piece of content owned by an organization.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId


@dataclass
class Message:
    id: MessageId
    organization_id: OrganizationId
    title: str
    content: str
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        organization_id: OrganizationId,
        title: str,
        content: str,
    ) -> Message:
        """Factory method to create a new active Message with a generated ID."""
        return cls(
            id=MessageId.generate(),
            organization_id=organization_id,
            title=title,
            content=content,
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )

    def apply_update(self, title: str, content: str, is_active: bool) -> None:
        self.title = title
        self.content = content
        self.is_active = is_active
        self.updated_at = datetime.now(timezone.utc)
