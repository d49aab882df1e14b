"""
In-Memory Message Repository Implementation.

Guidelines:
- Implements MessageRepository port from domain layer
- InMemoryMessageStore holds the rows and lives for the whole app (Scope.APP)
- Repository instances are cheap views over the store (Scope.REQUEST)
- Entities are copied in and out so callers only change stored state via update()
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)


@dataclass
class InMemoryMessageStore:
    """Process-local message rows keyed by message id (insertion ordered)."""

    rows: dict[str, Message] = field(default_factory=dict)


class InMemoryMessageRepository(MessageRepository):
    _store: InMemoryMessageStore

    def __init__(self, store: InMemoryMessageStore):
        self._store = store

    def _in_organization(self, organization_id: OrganizationId) -> list[Message]:
        return [
            row
            for row in self._store.rows.values()
            if row.organization_id.value == organization_id.value
        ]

    async def get_all_by_organization(
        self, organization_id: OrganizationId
    ) -> list[Message]:
        return [replace(row) for row in self._in_organization(organization_id)]

    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]:
        row = self._store.rows.get(message_id.value)
        if row is None or row.organization_id.value != organization_id.value:
            return None
        return replace(row)

    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]:
        for row in self._in_organization(organization_id):
            if row.title == title:
                return replace(row)
        return None

    async def create(self, message: Message) -> Message:
        self._store.rows[message.id.value] = replace(message)
        logger.debug(f"[InMemory] Stored message {message.id.value}")
        return replace(message)

    async def update(self, message: Message) -> None:
        self._store.rows[message.id.value] = replace(message)

    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool:
        row = self._store.rows.get(message_id.value)
        if row is None or row.organization_id.value != organization_id.value:
            return False
        del self._store.rows[message_id.value]
        return True
