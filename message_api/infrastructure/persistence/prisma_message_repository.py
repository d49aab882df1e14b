"""
Prisma Message Repository Implementation.

Guidelines:
- Implements MessageRepository port from domain layer
- Uses Prisma client for database operations
- Maps between Prisma models and domain entities
- All methods are async

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id              String    @id @default(uuid())
        organization_id String
        title           String    @db.VarChar(200)
        content         String    @db.VarChar(1000)
        is_active       Boolean   @default(true)
        created_at      DateTime  @default(now())
        updated_at      DateTime?
    }

Mapping:
- Prisma: id (str) ←→ Domain: id (MessageId)
- Prisma: organization_id (str) ←→ Domain: organization_id (OrganizationId)
- Other fields map directly

Every query filters on organization_id, so a message id from another
organization behaves exactly like a missing one.
"""

import logging
from typing import Optional

from prisma import Prisma
from prisma.models import Message as PrismaMessage

from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories.message_repository import MessageRepository
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            organization_id=OrganizationId(record.organization_id),
            title=record.title,
            content=record.content,
            is_active=record.is_active,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_all_by_organization(
        self, organization_id: OrganizationId
    ) -> list[Message]:
        """Get every message of an organization, oldest first."""
        records = await self._prisma.message.find_many(
            where={"organization_id": organization_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]:
        record = await self._prisma.message.find_first(
            where={"id": message_id.value, "organization_id": organization_id.value}
        )
        return self._to_entity(record) if record else None

    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]:
        """Exact title match, active or not."""
        record = await self._prisma.message.find_first(
            where={"organization_id": organization_id.value, "title": title}
        )
        return self._to_entity(record) if record else None

    async def create(self, message: Message) -> Message:
        record = await self._prisma.message.create(
            data={
                "id": message.id.value,
                "organization_id": message.organization_id.value,
                "title": message.title,
                "content": message.content,
                "is_active": message.is_active,
                "created_at": message.created_at,
            }
        )
        return self._to_entity(record)

    async def update(self, message: Message) -> None:
        """Write the mutable fields; id and organization_id are never touched."""
        await self._prisma.message.update(
            where={"id": message.id.value},
            data={
                "title": message.title,
                "content": message.content,
                "is_active": message.is_active,
                "updated_at": message.updated_at,
            },
        )

    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool:
        """
        Delete message by ID within the organization.

        Returns:
            True if a row was removed, False if nothing matched
        """
        count = await self._prisma.message.delete_many(
            where={"id": message_id.value, "organization_id": organization_id.value}
        )
        if not count:
            logger.warning(
                f"[PrismaMessageRepository] Nothing deleted for message {message_id.value}"
            )
        return count > 0
